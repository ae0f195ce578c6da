"""
Runtime error classifications for apply/persist passes.

These errors are isolated to a single tracked property: the engine catches
them, logs them and moves on to the next property.
"""

from typing import Optional

from .base import TrackingError


class StoreAccessError(TrackingError):
    """A store read, write or removal failed."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 key: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.key = key
        self.recoverable = True


class KeyNotFoundError(StoreAccessError):
    """Retrieve was called for a key the store does not hold."""

    def __init__(self, key: str, **kwargs):
        super().__init__(f"No stored value for key '{key}'", operation="retrieve",
                         key=key, **kwargs)


class OperationVetoed(TrackingError):
    """An interception hook declined the value for one property."""

    def __init__(self, property_name: str, operation: str, **kwargs):
        super().__init__(f"{operation} of '{property_name}' was vetoed", **kwargs)
        self.property_name = property_name
        self.operation = operation
        self.recoverable = True
