"""High-level application facade."""

from __future__ import annotations

from pathlib import Path

from .config import MAX_FAVORITES
from .favorites import FavoritesStore
from .storage.file_store import JsonFileStorage
from .utils.logging import get_logger

LOGGER = get_logger()


def open_store(root: Path, *, max_entries: int = MAX_FAVORITES) -> FavoritesStore:
    """Return a :class:`FavoritesStore` persisted under *root*."""

    storage = JsonFileStorage(root)
    LOGGER.debug("Opening favorites store in %s", storage.directory)
    return FavoritesStore(storage, max_entries=max_entries)
