"""In-process store keeping values as Python objects."""

import copy
from typing import Any

from ..errors import KeyNotFoundError
from .base import ObjectStore


class InMemoryStore(ObjectStore):
    """
    Dict-backed store; values live only as long as the store instance.

    Values are deep-copied on the way in and on the way out, so the store
    never shares a mutable object with a tracked target.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def contains_key(self, key: str) -> bool:
        return key in self._values

    def retrieve(self, key: str) -> Any:
        try:
            value = self._values[key]
        except KeyError:
            raise KeyNotFoundError(key) from None
        return copy.deepcopy(value)

    def persist(self, value: Any, key: str) -> None:
        self._values[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._values)

    def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)
