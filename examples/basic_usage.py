#!/usr/bin/env python3
"""
Basic Usage Example - statekeep

This script shows the save/restore cycle for a window-like object:
- Declare trackable attributes with hints
- Restore saved state on start-up
- Persist automatically when the object reports a change
- Veto or adjust values in flight with interception hooks

Run: python examples/basic_usage.py
"""

import tempfile
from pathlib import Path

from statekeep import StateTracker, Trackable, event, tracking_key
from statekeep.logging import configure_logging
from statekeep.persistence import SQLiteObjectStore


class EditorWindow:
    """A stand-in for a UI window whose geometry should survive restarts."""

    width = Trackable(default=800)
    height = Trackable(default=600)
    zoom = Trackable(default=1.0)
    resized = event()

    def __init__(self, name: str):
        self._name = name

    @tracking_key
    def name(self) -> str:
        return self._name

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.resized.fire(self, (width, height))


def run_session(db_path: Path, session: int) -> None:
    tracker = StateTracker(SQLiteObjectStore(str(db_path)))
    window = EditorWindow("main")

    configuration = tracker.configure(window).register_persist_trigger("resized")

    def clamp_zoom(sender, args):
        if args.property_name == "zoom":
            args.value = max(0.5, min(args.value, 3.0))

    configuration.applying_property += clamp_zoom
    configuration.apply()

    print(f"{session}. Session start: {window.width}x{window.height} zoom={window.zoom}")

    window.zoom = 7.5
    window.resize(1280 + session * 100, 720)
    print(f"   Resized to {window.width}x{window.height}, zoom set to {window.zoom}")
    print()


def main():
    """Run two sessions against the same database file."""
    configure_logging(level="WARNING")

    with tempfile.TemporaryDirectory() as temp_dir:
        db_path = Path(temp_dir) / "windows.db"
        run_session(db_path, 1)
        run_session(db_path, 2)

        store = SQLiteObjectStore(str(db_path))
        print("3. Stored keys:")
        for key in store.keys():
            print(f"   {key} = {store.retrieve(key)}")


if __name__ == "__main__":
    main()
