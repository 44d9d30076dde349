"""Helpers for writing text payloads atomically."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def atomic_write_text(path: Path, data: str) -> None:
    """Atomically write *data* into *path*.

    The payload lands in a sibling ``.tmp`` file that is flushed to disk and
    then renamed over *path*, so readers only ever see the old or the new
    content.
    """

    tmp_path = path.with_suffix(path.suffix + ".tmp")
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with tmp_path.open("w", encoding="utf-8") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        try:
            tmp_path.replace(path)
        except PermissionError as exc:
            if sys.platform != "win32":
                raise
            _replace_file_windows(tmp_path, path, exc)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def _replace_file_windows(tmp_path: Path, path: Path, original_error: PermissionError) -> None:
    """Replace *path* with *tmp_path* using the Windows API."""

    import ctypes
    from ctypes import wintypes

    replace_file = ctypes.windll.kernel32.ReplaceFileW
    replace_file.argtypes = [
        wintypes.LPCWSTR,
        wintypes.LPCWSTR,
        wintypes.LPCWSTR,
        wintypes.DWORD,
        wintypes.LPVOID,
        wintypes.LPVOID,
    ]
    replace_file.restype = wintypes.BOOL

    ctypes.set_last_error(0)
    succeeded = replace_file(
        wintypes.LPCWSTR(str(path)),
        wintypes.LPCWSTR(str(tmp_path)),
        None,
        wintypes.DWORD(0x00000002),  # REPLACEFILE_WRITE_THROUGH
        None,
        None,
    )
    if not succeeded:
        error_code = ctypes.get_last_error()
        raise PermissionError(error_code, os.strerror(error_code), str(path)) from original_error


def read_text(path: Path) -> str | None:
    """Return the UTF-8 text stored at *path*, or ``None`` when it is missing."""

    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
