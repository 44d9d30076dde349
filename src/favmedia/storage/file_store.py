"""Filesystem storage backend writing one JSON document per key."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from ..cache.lock import FileLock
from ..config import LOCK_EXPIRE_SEC, WORK_DIR_NAME
from ..errors import LockTimeoutError, StorageReadError, StorageWriteError
from ..utils.jsonio import atomic_write_text, read_text

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class JsonFileStorage:
    """Store each key in ``<root>/.favmedia/<key>.json``.

    Writes go through :func:`atomic_write_text` while holding a per-key
    :class:`FileLock`, so concurrent writers serialise and readers never see
    a partially written file.
    """

    def __init__(self, root: Path, *, lock_timeout: float | None = None):
        self.root = root
        self.directory = root / WORK_DIR_NAME
        self._lock_timeout = LOCK_EXPIRE_SEC if lock_timeout is None else lock_timeout

    def path_for(self, key: str) -> Path:
        if not key:
            raise ValueError("Storage key must not be empty")
        return self.directory / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageReadError(f"Unable to read {path}") from exc

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            with FileLock(self.root, path.stem, timeout=self._lock_timeout):
                atomic_write_text(path, value)
        except LockTimeoutError as exc:
            raise StorageWriteError(f"Storage key {key!r} is locked") from exc
        except (OSError, UnicodeError) as exc:
            raise StorageWriteError(f"Unable to write {path}") from exc
