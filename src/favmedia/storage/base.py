"""Contract shared by every favorites storage backend."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStorage(Protocol):
    """Synchronous string key-value store.

    ``get`` returns ``None`` for a missing key and never raises for that
    case. ``set`` replaces the whole value for *key* and raises
    :class:`~favmedia.errors.StorageWriteError` when the value could not be
    stored.
    """

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...
