"""Persistence layer: backend contract and implementations."""

from .base import StoreProtocol
from .file_store import FileStore
from .memory_store import MemoryStore

__all__ = ["StoreProtocol", "FileStore", "MemoryStore", "build_store"]


def build_store(settings) -> StoreProtocol:
    """Return the backend selected by SCHEMA_STORAGE."""
    if settings.SCHEMA_STORAGE == "memory":
        return MemoryStore()
    return FileStore(settings.SCHEMA_DATA_DIR)
