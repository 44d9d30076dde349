"""Logging helpers for favmedia."""

from __future__ import annotations

import logging

_LOGGER_NAME = "favmedia"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or one of its children when *name* is given.

    A :class:`logging.NullHandler` is attached to the package logger so the
    library stays silent until the host application configures logging.
    """

    root = logging.getLogger(_LOGGER_NAME)
    if not any(isinstance(handler, logging.NullHandler) for handler in root.handlers):
        root.addHandler(logging.NullHandler())
    if name:
        return root.getChild(name)
    return root


__all__ = ["get_logger"]
