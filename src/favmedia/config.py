"""Default configuration values for favmedia."""

from __future__ import annotations

from pathlib import Path
from typing import Final

FAVORITES_KEY: Final[str] = "favoriteMedia"
MAX_FAVORITES: Final[int] = 100

# Tag used when a caller does not classify the media before adding it.
DEFAULT_MEDIA_TYPE: Final[str] = "gif"

GIF_MARKERS: Final[tuple[str, ...]] = (".gif", "tenor.com", "giphy.com")
IMAGE_EXTENSIONS: Final[tuple[str, ...]] = ("jpg", "jpeg", "png", "webp")

LOCK_EXPIRE_SEC: Final[int] = 30
LOCK_POLL_INTERVAL_SEC: Final[float] = 0.1

SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parent / "schemas"
WORK_DIR_NAME: Final[str] = ".favmedia"

# ---------------------------------------------------------------------------
# QSettings backend
# ---------------------------------------------------------------------------

SETTINGS_ORGANIZATION: Final[str] = "favmedia"
SETTINGS_APPLICATION: Final[str] = "FavoriteMedia"
SETTINGS_GROUP: Final[str] = "storage"
