"""Media type classification for favorite urls."""

from __future__ import annotations

import re

from .config import GIF_MARKERS, IMAGE_EXTENSIONS
from .models.types import MediaType

# Not anchored: the extension may appear anywhere, including in a query string.
_IMAGE_PATTERN = re.compile(r"\.(?:" + "|".join(IMAGE_EXTENSIONS) + r")")


def classify(url: str) -> MediaType:
    """Return the :class:`MediaType` suggested by *url*.

    Matching is case-insensitive and purely textual. GIF markers (``.gif``
    and the Tenor/Giphy hosts) are checked before image extensions, so a url
    that matches both is reported as a GIF.
    """

    lower = url.lower()
    if any(marker in lower for marker in GIF_MARKERS):
        return MediaType.GIF
    if _IMAGE_PATTERN.search(lower):
        return MediaType.IMAGE
    return MediaType.UNKNOWN


__all__ = ["classify"]
