"""Custom exception hierarchy for favmedia."""

from __future__ import annotations


class FavMediaError(Exception):
    """Base class for all custom errors raised by favmedia."""


class StorageReadError(FavMediaError):
    """Raised when a storage backend cannot read a stored value."""


class StorageWriteError(FavMediaError):
    """Raised when a storage backend fails to replace a stored value."""


class PayloadInvalidError(FavMediaError):
    """Raised when a persisted favorites payload cannot be decoded."""


class LockTimeoutError(FavMediaError):
    """Raised when a file-level lock cannot be acquired in time."""
