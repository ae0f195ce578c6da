"""Tests for the SQLite value store."""

import os
import shutil
import sqlite3
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from statekeep.configuration.tracking import TrackingConfiguration
from statekeep.errors import KeyNotFoundError, StoreAccessError
from statekeep.persistence.sqlite_store import SQLiteObjectStore, StoredValue


class TestSQLiteObjectStore:
    """Test SQLiteObjectStore class."""

    def setup_method(self):
        """Setup test database."""
        self.temp_dir = tempfile.mkdtemp()
        self.db_path = os.path.join(self.temp_dir, "test_values.db")
        self.store = SQLiteObjectStore(self.db_path)

    def teardown_method(self):
        """Cleanup test database."""
        shutil.rmtree(self.temp_dir)

    def test_init_database(self):
        """Database file and table are created."""
        assert Path(self.db_path).exists()

        with self.store._get_connection() as conn:
            cursor = conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
            tables = [row[0] for row in cursor.fetchall()]
            assert "tracked_values" in tables

    def test_persist_and_retrieve(self):
        self.store.persist({"left": 10, "top": 20}, "Window_main.position")

        assert self.store.contains_key("Window_main.position")
        assert self.store.retrieve("Window_main.position") == {"left": 10, "top": 20}

    def test_persist_replaces_value(self):
        self.store.persist(1, "Counter_.value")
        self.store.persist(2, "Counter_.value")

        assert self.store.retrieve("Counter_.value") == 2
        assert self.store.keys() == ["Counter_.value"]

    def test_scalar_types(self):
        for key, value in [("a", "text"), ("b", 1.5), ("c", True), ("d", None), ("e", [1, 2])]:
            self.store.persist(value, key)
            assert self.store.retrieve(key) == value

    def test_retrieve_missing_key(self):
        with pytest.raises(KeyNotFoundError) as exc_info:
            self.store.retrieve("Window_main.width")

        assert exc_info.value.key == "Window_main.width"
        assert exc_info.value.operation == "retrieve"
        assert not self.store.contains_key("Window_main.width")

    def test_stored_value_metadata(self):
        self.store.persist(800, "Window_main.width")

        stored = self.store.get_stored_value("Window_main.width")

        assert isinstance(stored, StoredValue)
        assert stored.value == 800
        assert stored.updated_at
        assert self.store.get_stored_value("missing") is None

    def test_remove(self):
        self.store.persist(800, "Window_main.width")

        self.store.remove("Window_main.width")
        self.store.remove("Window_main.width")

        assert self.store.keys() == []

    def test_clear(self):
        self.store.persist(1, "a")
        self.store.persist(2, "b")

        self.store.clear()

        assert self.store.keys() == []

    def test_unserializable_value(self):
        with pytest.raises(StoreAccessError) as exc_info:
            self.store.persist(object(), "Window_main.handle")

        assert exc_info.value.operation == "persist"
        assert not self.store.contains_key("Window_main.handle")

    def test_corrupt_value(self):
        with self.store._get_connection() as conn:
            conn.execute(
                "INSERT INTO tracked_values (key, value, updated_at) VALUES (?, ?, ?)",
                ("broken", b"{not json", "2024-01-01T00:00:00+00:00"),
            )
            conn.commit()

        with pytest.raises(StoreAccessError):
            self.store.retrieve("broken")

    def test_database_errors_wrapped(self):
        with patch.object(self.store, "_get_connection") as mock_conn:
            mock_conn.side_effect = sqlite3.OperationalError("database is locked")

            with pytest.raises(StoreAccessError) as exc_info:
                self.store.persist(1, "Window_main.width")

        assert exc_info.value.key == "Window_main.width"
        assert exc_info.value.recoverable is True

    def test_values_survive_new_store_instance(self):
        """A second store on the same file sees persisted values."""
        self.store.persist("saved", "Editor_.text")

        reopened = SQLiteObjectStore(self.db_path)

        assert reopened.retrieve("Editor_.text") == "saved"


class TestSQLiteRoundTrip:
    """Test a tracking configuration backed by SQLite across store instances."""

    def test_apply_restores_from_file(self, tmp_path):
        class Window:
            def __init__(self):
                self.width = 800
                self.height = 600

        db_path = str(tmp_path / "state.db")
        first = Window()
        first.width, first.height = 1280, 720
        TrackingConfiguration(first, SQLiteObjectStore(db_path)).add_properties("width", "height").persist()

        second = Window()
        TrackingConfiguration(second, SQLiteObjectStore(db_path)).add_properties("width", "height").apply()

        assert (second.width, second.height) == (1280, 720)
