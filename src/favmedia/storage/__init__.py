"""Key-value persistence backends for the favorites payload."""

from .base import KeyValueStorage
from .file_store import JsonFileStorage
from .memory import MemoryStorage

__all__ = ["JsonFileStorage", "KeyValueStorage", "MemoryStorage"]
