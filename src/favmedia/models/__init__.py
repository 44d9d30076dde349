"""Data models used by favmedia."""

from .types import AddResult, FavoriteEntry, MediaType, RemoveResult

__all__ = ["AddResult", "FavoriteEntry", "MediaType", "RemoveResult"]
