"""Ownership of teardown callbacks registered by host integration code."""

from __future__ import annotations

import logging
from typing import Callable, List

from .errors import FavMediaError

_LOGGER = logging.getLogger(__name__)

Teardown = Callable[[], object]


class HandleRegistry:
    """Collect teardown callbacks (unpatch functions, subscriptions, ...).

    The host creates one registry when the integration loads and hands it to
    :func:`unregister_all` when it unloads.
    """

    def __init__(self) -> None:
        self._handles: List[Teardown] = []

    def register(self, handle: Teardown) -> Teardown:
        """Track *handle* and return it unchanged."""

        if not callable(handle):
            raise TypeError("handle must be callable")
        self._handles.append(handle)
        return handle

    def __len__(self) -> int:
        return len(self._handles)

    def close(self) -> None:
        """Run every handle once, newest first, and forget them all.

        A failing handle does not stop the others. When any of them failed a
        :class:`FavMediaError` is raised once all handles have run.
        """

        handles, self._handles = self._handles, []
        failures = 0
        for handle in reversed(handles):
            try:
                handle()
            except Exception:
                failures += 1
                _LOGGER.exception("Teardown handle %r failed", handle)
        if failures:
            raise FavMediaError(f"{failures} teardown handle(s) failed")


def unregister_all(registry: HandleRegistry) -> None:
    registry.close()


__all__ = ["HandleRegistry", "unregister_all"]
