"""
Error hierarchy for the tracking engine.

Binding errors are raised while a configuration is being built. Store access
errors and vetoes happen per property during apply/persist and never escape
those operations.
"""

from .base import (
    TrackingError,
    SettingsError,
)
from .binding import BindingError
from .runtime import (
    StoreAccessError,
    KeyNotFoundError,
    OperationVetoed,
)

__all__ = [
    # Base
    "TrackingError",
    # Configuration-time
    "BindingError",
    "SettingsError",
    # Per-property runtime
    "StoreAccessError",
    "KeyNotFoundError",
    "OperationVetoed",
]
