"""In-process storage backend."""

from __future__ import annotations

from typing import Dict, Optional

from ..errors import StorageWriteError


class MemoryStorage:
    """Dictionary-backed :class:`~favmedia.storage.base.KeyValueStorage`.

    Setting :attr:`fail_writes` makes every subsequent :meth:`set` raise
    :class:`StorageWriteError`, which lets hosts and tests exercise the
    persist-failure path without touching the filesystem.
    """

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})
        self.fail_writes = False
        self.write_count = 0

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self.write_count += 1
        if self.fail_writes:
            raise StorageWriteError(f"Write rejected for key {key!r}")
        self._values[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._values
