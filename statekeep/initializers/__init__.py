"""Configuration initializers and the declarative hints they read."""

from .base import ConfigurationInitializer, TrackingAware
from .default import DefaultConfigurationInitializer
from .hints import (
    Trackable,
    TrackableHint,
    TrackableProperty,
    TrackingKeyProperty,
    find_tracking_key,
    iter_trackable_hints,
    trackable,
    tracking_key,
)
from .registry import InitializerRegistry

__all__ = [
    "ConfigurationInitializer",
    "TrackingAware",
    "DefaultConfigurationInitializer",
    "InitializerRegistry",
    "Trackable",
    "TrackableHint",
    "TrackableProperty",
    "TrackingKeyProperty",
    "find_tracking_key",
    "iter_trackable_hints",
    "trackable",
    "tracking_key",
]
