"""Store contract consumed by tracking configurations."""

from abc import ABC, abstractmethod
from typing import Any


class ObjectStore(ABC):
    """Synchronous key-value store for tracked property values."""

    @abstractmethod
    def contains_key(self, key: str) -> bool:
        """Return True if a value is stored under ``key``."""
        pass

    @abstractmethod
    def retrieve(self, key: str) -> Any:
        """
        Return the value stored under ``key``.

        Raises:
            KeyNotFoundError: If nothing is stored under ``key``
        """
        pass

    @abstractmethod
    def persist(self, value: Any, key: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove the value under ``key``; no-op if absent."""
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        """Return every stored key."""
        pass

    def clear(self) -> None:
        """Remove every stored value."""
        for key in self.keys():
            self.remove(key)
