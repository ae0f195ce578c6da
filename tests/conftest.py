"""Pytest configuration and shared fixtures."""

from typing import Any

import logging

import pytest
import structlog

from statekeep.configuration.tracking import TrackingConfiguration
from statekeep.persistence.memory_store import InMemoryStore


class Window:
    """Plain target with instance attributes."""

    def __init__(self, width: int = 800, height: int = 600, title: str = "untitled"):
        self.width = width
        self.height = height
        self.title = title


class FlakyStore(InMemoryStore):
    """In-memory store that fails for selected keys and operations."""

    def __init__(self) -> None:
        super().__init__()
        self.failing: dict[str, set[str]] = {}

    def fail(self, operation: str, key: str) -> None:
        self.failing.setdefault(operation, set()).add(key)

    def _check(self, operation: str, key: str) -> None:
        if key in self.failing.get(operation, set()):
            raise OSError(f"{operation} failed for {key}")

    def contains_key(self, key: str) -> bool:
        self._check("contains_key", key)
        return super().contains_key(key)

    def retrieve(self, key: str) -> Any:
        self._check("retrieve", key)
        return super().retrieve(key)

    def persist(self, value: Any, key: str) -> None:
        self._check("persist", key)
        super().persist(value, key)

    def remove(self, key: str) -> None:
        self._check("remove", key)
        super().remove(key)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog or root logger configuration a test applied."""
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    structlog.reset_defaults()
    root.setLevel(level)
    root.handlers[:] = handlers


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def flaky_store() -> FlakyStore:
    return FlakyStore()


@pytest.fixture
def window() -> Window:
    return Window()


@pytest.fixture
def configuration(window: Window, store: InMemoryStore) -> TrackingConfiguration:
    """Configuration tracking width and height of the ``window`` fixture."""
    return (
        TrackingConfiguration(window, store)
        .identify_as("main")
        .add_properties("width", "height")
    )
