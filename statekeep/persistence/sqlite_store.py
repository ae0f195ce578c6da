"""SQLite-backed store for tracked property values."""

import sqlite3
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import orjson

from ..errors import KeyNotFoundError, StoreAccessError
from ..logging.config import get_logger
from .base import ObjectStore


@dataclass
class StoredValue:
    """Stored value with metadata."""
    key: str
    value: Any
    updated_at: str


class SQLiteObjectStore(ObjectStore):
    """
    SQLite-based value store.

    Values are encoded with orjson, so anything orjson can serialize
    (dicts, lists, str, int, float, bool, None, dataclasses, datetimes)
    round-trips; containers come back as lists and dicts.
    """

    def __init__(self, db_path: str = "statekeep.db"):
        self.db_path = Path(db_path)
        self.logger = get_logger("statekeep.store.sqlite")
        self._lock = threading.Lock()

        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS tracked_values (
                    key TEXT PRIMARY KEY,
                    value BLOB NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_tracked_values_updated_at
                ON tracked_values(updated_at)
            """)

            conn.commit()

    @contextmanager
    def _get_connection(self):
        """Get database connection with proper error handling."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
            conn.row_factory = sqlite3.Row
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            self.logger.error("Database error", db_path=str(self.db_path), error=str(e))
            raise
        finally:
            if conn:
                conn.close()

    def contains_key(self, key: str) -> bool:
        try:
            with self._get_connection() as conn:
                row = conn.execute(
                    "SELECT 1 FROM tracked_values WHERE key = ?", (key,)
                ).fetchone()
                return row is not None
        except sqlite3.Error as e:
            raise StoreAccessError(str(e), operation="contains_key", key=key) from e

    def retrieve(self, key: str) -> Any:
        stored = self.get_stored_value(key)
        if stored is None:
            raise KeyNotFoundError(key)
        return stored.value

    def get_stored_value(self, key: str) -> Optional[StoredValue]:
        """Get a value together with its last update time."""
        try:
            with self._get_connection() as conn:
                row = conn.execute(
                    "SELECT * FROM tracked_values WHERE key = ?", (key,)
                ).fetchone()
        except sqlite3.Error as e:
            raise StoreAccessError(str(e), operation="retrieve", key=key) from e

        if row is None:
            return None

        try:
            return self._row_to_stored_value(row)
        except orjson.JSONDecodeError as e:
            raise StoreAccessError(f"Corrupt stored value: {e}", operation="retrieve",
                                   key=key) from e

    def persist(self, value: Any, key: str) -> None:
        try:
            payload = orjson.dumps(value)
        except TypeError as e:
            raise StoreAccessError(f"Value is not serializable: {e}", operation="persist",
                                   key=key) from e

        with self._lock:
            try:
                with self._get_connection() as conn:
                    now = datetime.now(timezone.utc).isoformat()
                    conn.execute("""
                        INSERT OR REPLACE INTO tracked_values (key, value, updated_at)
                        VALUES (?, ?, ?)
                    """, (key, payload, now))
                    conn.commit()
            except sqlite3.Error as e:
                raise StoreAccessError(str(e), operation="persist", key=key) from e

        self.logger.debug("Value stored", key=key)

    def remove(self, key: str) -> None:
        with self._lock:
            try:
                with self._get_connection() as conn:
                    conn.execute("DELETE FROM tracked_values WHERE key = ?", (key,))
                    conn.commit()
            except sqlite3.Error as e:
                raise StoreAccessError(str(e), operation="remove", key=key) from e

    def keys(self) -> list[str]:
        try:
            with self._get_connection() as conn:
                rows = conn.execute(
                    "SELECT key FROM tracked_values ORDER BY key"
                ).fetchall()
                return [row["key"] for row in rows]
        except sqlite3.Error as e:
            raise StoreAccessError(str(e), operation="keys") from e

    def clear(self) -> None:
        with self._lock:
            try:
                with self._get_connection() as conn:
                    cursor = conn.execute("DELETE FROM tracked_values")
                    conn.commit()
                    deleted_count = cursor.rowcount
            except sqlite3.Error as e:
                raise StoreAccessError(str(e), operation="clear") from e

        self.logger.info("Cleared stored values", deleted_count=deleted_count)

    def _row_to_stored_value(self, row: sqlite3.Row) -> StoredValue:
        """Convert database row to StoredValue object."""
        return StoredValue(
            key=row["key"],
            value=orjson.loads(row["value"]),
            updated_at=row["updated_at"],
        )
