"""Locking primitives guarding on-disk favorites payloads."""
