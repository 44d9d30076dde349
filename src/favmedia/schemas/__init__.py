"""Schema validation helpers."""

from __future__ import annotations

import json
from typing import Any, List

from jsonschema import Draft202012Validator

from ..config import SCHEMA_DIR
from ..errors import PayloadInvalidError

_FAVORITES_VALIDATOR: Draft202012Validator | None = None


def _load_validator(name: str) -> Draft202012Validator:
    schema_path = SCHEMA_DIR / name
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def validate_favorites(document: Any) -> None:
    """Validate a favorites payload and raise :class:`PayloadInvalidError` on failure."""

    global _FAVORITES_VALIDATOR
    if _FAVORITES_VALIDATOR is None:
        _FAVORITES_VALIDATOR = _load_validator("favorites.schema.json")
    errors = sorted(_FAVORITES_VALIDATOR.iter_errors(document), key=lambda err: [str(part) for part in err.path])
    if errors:
        messages = "; ".join(error.message for error in errors)
        raise PayloadInvalidError(messages)


def decode_favorites(payload: str) -> List[dict[str, Any]]:
    """Parse *payload* as JSON and validate it against the favorites schema."""

    try:
        document = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise PayloadInvalidError(f"Invalid JSON in favorites payload: {exc}") from exc
    except RecursionError as exc:
        raise PayloadInvalidError("Favorites payload is nested too deeply") from exc
    validate_favorites(document)
    return document
