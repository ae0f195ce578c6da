"""
statekeep - save and restore selected attributes of live objects.

Bind a named subset of an object's attributes to entries in a pluggable
key-value store, then ``apply()`` saved values on start-up and ``persist()``
current values on demand or when a trigger event fires.
"""

from .configuration import (
    MISSING,
    Event,
    TrackingConfiguration,
    TrackingOperationEventArgs,
    event,
)
from .errors import (
    BindingError,
    KeyNotFoundError,
    OperationVetoed,
    SettingsError,
    StoreAccessError,
    TrackingError,
)
from .initializers import (
    ConfigurationInitializer,
    DefaultConfigurationInitializer,
    Trackable,
    TrackingAware,
    trackable,
    tracking_key,
)
from .persistence import InMemoryStore, ObjectStore, SQLiteObjectStore
from .tracker import StateTracker

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "Event",
    "TrackingConfiguration",
    "TrackingOperationEventArgs",
    "event",
    "BindingError",
    "KeyNotFoundError",
    "OperationVetoed",
    "SettingsError",
    "StoreAccessError",
    "TrackingError",
    "ConfigurationInitializer",
    "DefaultConfigurationInitializer",
    "Trackable",
    "TrackingAware",
    "trackable",
    "tracking_key",
    "InMemoryStore",
    "ObjectStore",
    "SQLiteObjectStore",
    "StateTracker",
]
