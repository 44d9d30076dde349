"""Persistent, bounded list of favorite media references."""

from __future__ import annotations

import json
import logging
import time
from typing import Callable, List

from .config import DEFAULT_MEDIA_TYPE, FAVORITES_KEY, MAX_FAVORITES
from .errors import PayloadInvalidError, StorageReadError, StorageWriteError
from .models.types import AddResult, FavoriteEntry, MediaType, RemoveResult
from .schemas import decode_favorites
from .storage.base import KeyValueStorage

_LOGGER = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class FavoritesStore:
    """Load, add and remove favorites kept under a single storage key.

    Every operation reads the full snapshot, works on a local copy and writes
    the full snapshot back. The list is ordered newest-first, holds at most
    ``max_entries`` items and never contains the same url twice. Storage and
    decode faults never escape: reads fall back to an empty list and writes
    report :attr:`AddResult.PERSIST_FAILED` / :attr:`RemoveResult.PERSIST_FAILED`.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = FAVORITES_KEY,
        max_entries: int = MAX_FAVORITES,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be positive")
        self._storage = storage
        self._key = key
        self._max_entries = max_entries
        self._clock = clock

    @property
    def key(self) -> str:
        return self._key

    @property
    def max_entries(self) -> int:
        return self._max_entries

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------
    def load(self) -> List[FavoriteEntry]:
        """Return the persisted favorites, newest first.

        Missing, unreadable or malformed payloads all yield an empty list so
        the caller stays usable when storage is corrupted.
        """

        try:
            payload = self._storage.get(self._key)
        except (StorageReadError, OSError):
            _LOGGER.warning("Unable to read favorites under %r", self._key, exc_info=True)
            return []
        if payload is None:
            return []
        try:
            records = decode_favorites(payload)
        except PayloadInvalidError as exc:
            _LOGGER.warning("Discarding malformed favorites payload under %r: %s", self._key, exc)
            return []
        return self._normalise([FavoriteEntry.from_record(record) for record in records])

    def list(self) -> List[FavoriteEntry]:
        """Alias of :meth:`load` for read-only callers."""

        return self.load()

    def contains(self, url: str) -> bool:
        return any(entry.url == url for entry in self.load())

    def __len__(self) -> int:
        return len(self.load())

    def _normalise(self, entries: List[FavoriteEntry]) -> List[FavoriteEntry]:
        seen: set[str] = set()
        unique: List[FavoriteEntry] = []
        for entry in entries:
            if entry.url in seen:
                continue
            seen.add(entry.url)
            unique.append(entry)
        if len(unique) != len(entries):
            _LOGGER.warning(
                "Dropped %d duplicate favorites under %r", len(entries) - len(unique), self._key
            )
        if len(unique) > self._max_entries:
            _LOGGER.warning(
                "Favorites under %r exceed the limit of %d; keeping the newest entries",
                self._key,
                self._max_entries,
            )
            del unique[self._max_entries:]
        return unique

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add(self, url: str, media_type: MediaType | str = DEFAULT_MEDIA_TYPE) -> AddResult:
        """Insert *url* at the front of the list.

        Urls are compared by exact string equality. Nothing is written when
        the url is already present or the list is full.
        """

        if not isinstance(url, str) or not url:
            raise ValueError("url must be a non-empty string")
        kind = MediaType.coerce(media_type)

        favorites = self.load()
        if any(entry.url == url for entry in favorites):
            return AddResult.ALREADY_EXISTS
        if len(favorites) >= self._max_entries:
            return AddResult.LIMIT_REACHED

        entry = FavoriteEntry(url=url, media_type=kind, created_at=int(self._clock()))
        if not self._persist([entry, *favorites]):
            return AddResult.PERSIST_FAILED
        _LOGGER.debug("Added %s favorite %s", kind.value, url)
        return AddResult.ADDED

    def remove(self, url: str) -> RemoveResult:
        """Drop every entry matching *url*.

        Removing an absent url still rewrites the snapshot and reports
        :attr:`RemoveResult.REMOVED`.
        """

        favorites = [entry for entry in self.load() if entry.url != url]
        if not self._persist(favorites):
            return RemoveResult.PERSIST_FAILED
        _LOGGER.debug("Removed favorite %s", url)
        return RemoveResult.REMOVED

    def _persist(self, favorites: List[FavoriteEntry]) -> bool:
        payload = json.dumps([entry.to_record() for entry in favorites], ensure_ascii=False)
        try:
            self._storage.set(self._key, payload)
        except (StorageWriteError, OSError, UnicodeError):
            _LOGGER.error("Unable to save favorites under %r", self._key, exc_info=True)
            return False
        return True


__all__ = ["FavoritesStore"]
