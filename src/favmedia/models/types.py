"""Data models used by favmedia."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping


class MediaType(str, Enum):
    """Tag describing what kind of media a favorite url points at."""

    GIF = "gif"
    IMAGE = "image"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: "MediaType | str") -> "MediaType":
        """Return the member for *value*, raising :class:`ValueError` if unknown."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown media type: {value!r}") from None


@dataclass(slots=True, frozen=True)
class FavoriteEntry:
    """A saved media reference.

    ``media_type`` and ``created_at`` are persisted under the ``type`` and
    ``timestamp`` keys so payloads written by earlier releases stay readable.
    """

    url: str
    media_type: MediaType
    created_at: int
    """Milliseconds since the Unix epoch at insertion time."""

    @property
    def created_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.created_at / 1000, tz=timezone.utc)

    def to_record(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "type": self.media_type.value,
            "timestamp": self.created_at,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "FavoriteEntry":
        return cls(
            url=record["url"],
            media_type=MediaType(record["type"]),
            created_at=int(record["timestamp"]),
        )


class AddResult(str, Enum):
    """Outcome of :meth:`favmedia.favorites.FavoritesStore.add`."""

    ADDED = "added"
    ALREADY_EXISTS = "already_exists"
    LIMIT_REACHED = "limit_reached"
    PERSIST_FAILED = "persist_failed"


class RemoveResult(str, Enum):
    """Outcome of :meth:`favmedia.favorites.FavoritesStore.remove`."""

    REMOVED = "removed"
    PERSIST_FAILED = "persist_failed"
