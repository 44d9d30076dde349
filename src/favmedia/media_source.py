"""Locate a favoritable media reference inside a chat message payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from .media_classifier import classify
from .models.types import MediaType

_EMBED_TYPES: dict[str, MediaType] = {"gifv": MediaType.GIF, "image": MediaType.IMAGE}


@dataclass(slots=True, frozen=True)
class MediaCandidate:
    """Media url found in a message, ready to pass to ``FavoritesStore.add``."""

    url: str
    media_type: MediaType


def _nested_url(value: object) -> Optional[str]:
    if isinstance(value, Mapping):
        url = value.get("url")
        if isinstance(url, str) and url:
            return url
    return None


def _first_text(*values: object) -> Optional[str]:
    for value in values:
        if isinstance(value, str) and value:
            return value
    return None


def _items(message: Mapping[str, Any], field: str) -> Iterable[Mapping[str, Any]]:
    items = message.get(field)
    if not isinstance(items, (list, tuple)):
        return []
    return [item for item in items if isinstance(item, Mapping)]


def find_message_media(message: Mapping[str, Any] | None) -> Optional[MediaCandidate]:
    """Return the first image attachment or GIF/image embed of *message*.

    Attachments take priority over embeds. The first attachment whose
    ``content_type`` starts with ``image/`` is classified from its url; when
    it carries no url the search moves on to the embeds. An embed qualifies
    when its ``type`` is ``gifv`` or ``image`` and takes its media type from
    that field.
    """

    if not message:
        return None

    for attachment in _items(message, "attachments"):
        content_type = attachment.get("content_type")
        if not isinstance(content_type, str) or not content_type.startswith("image/"):
            continue
        url = _first_text(attachment.get("url"), attachment.get("proxy_url"))
        if url:
            return MediaCandidate(url, classify(url))
        # Only the first image attachment is considered.
        break

    for embed in _items(message, "embeds"):
        embed_type = embed.get("type")
        kind = _EMBED_TYPES.get(embed_type) if isinstance(embed_type, str) else None
        if kind is None:
            continue
        url = (
            _first_text(embed.get("url"))
            or _nested_url(embed.get("thumbnail"))
            or _nested_url(embed.get("image"))
        )
        if url:
            return MediaCandidate(url, kind)
    return None


__all__ = ["MediaCandidate", "find_message_media"]
