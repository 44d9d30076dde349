"""Bounded, deduplicated favorites list for GIF and image urls."""

from __future__ import annotations

from .favorites import FavoritesStore
from .media_classifier import classify
from .models.types import AddResult, FavoriteEntry, MediaType, RemoveResult
from .utils.logging import get_logger

get_logger()

__all__ = [
    "AddResult",
    "FavoriteEntry",
    "FavoritesStore",
    "MediaType",
    "RemoveResult",
    "classify",
]
