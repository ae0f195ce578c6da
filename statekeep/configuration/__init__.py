"""Tracking configurations, property descriptors, events and triggers."""

from .descriptors import MISSING, TrackedPropertyDescriptor, create_descriptor
from .events import Event, TrackingOperationEventArgs, event
from .tracking import DEFAULT_TRACKER_NAME, TrackingConfiguration
from .triggers import PersistRequestSource, TriggerSubscription, subscribe_to_event

__all__ = [
    "MISSING",
    "TrackedPropertyDescriptor",
    "create_descriptor",
    "Event",
    "TrackingOperationEventArgs",
    "event",
    "DEFAULT_TRACKER_NAME",
    "TrackingConfiguration",
    "PersistRequestSource",
    "TriggerSubscription",
    "subscribe_to_event",
]
