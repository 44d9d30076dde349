"""Storage backend built on :class:`PySide6.QtCore.QSettings`."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QSettings

from ..config import SETTINGS_APPLICATION, SETTINGS_GROUP, SETTINGS_ORGANIZATION
from ..errors import StorageWriteError


class QSettingsStorage:
    """Persist favorites inside the host application's ``QSettings``.

    Values are stored as strings under ``<group>/<key>``. ``QSettings`` does
    not raise on failure, so :meth:`set` forces a :meth:`QSettings.sync` and
    inspects :meth:`QSettings.status` to surface write errors.
    """

    def __init__(self, settings: QSettings | None = None, *, group: str = SETTINGS_GROUP) -> None:
        self._settings = settings or QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
        self._group = group

    def _qualified(self, key: str) -> str:
        return f"{self._group}/{key}" if self._group else key

    def get(self, key: str) -> Optional[str]:
        value = self._settings.value(self._qualified(key))
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(self._qualified(key), value)
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            raise StorageWriteError(f"QSettings rejected {key!r}: {status}")
