"""Store contract and reference backends for tracked values."""

from .base import ObjectStore
from .memory_store import InMemoryStore
from .sqlite_store import SQLiteObjectStore, StoredValue

__all__ = ["ObjectStore", "InMemoryStore", "SQLiteObjectStore", "StoredValue"]
