"""Utility helpers shared across favmedia."""
