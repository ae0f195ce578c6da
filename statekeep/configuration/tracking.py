"""
Tracking configuration: the binding set for one target plus apply/persist.

A configuration holds a weak reference to its target, so it never keeps the
target alive. Once the target is collected, apply and persist do nothing.

Every tracked property is processed independently. Store failures, hook
errors and accessor errors are logged for that property and the pass moves
on; a veto from an interception hook skips the property silently.
"""

import time
import weakref
from typing import Any, Optional

from structlog.types import FilteringBoundLogger

from ..errors import BindingError, OperationVetoed
from ..logging.config import get_tracking_logger, log_property_failure
from ..persistence.base import ObjectStore
from .descriptors import MISSING, TrackedPropertyDescriptor, create_descriptor
from .events import Event, TrackingOperationEventArgs
from .triggers import PersistRequestSource, TriggerSubscription, subscribe_to_event

DEFAULT_TRACKER_NAME = "default"


class TrackingConfiguration:
    """
    Tracked properties of a single target object and the logic to save and
    restore them.

    Args:
        target: Object whose attributes are tracked (held weakly)
        store: Backing store for tracked values
        tracker_name: Identity of the owning tracker, used to filter hints
        logger: Logger for per-property diagnostics
    """

    def __init__(
        self,
        target: Any,
        store: ObjectStore,
        tracker_name: str = DEFAULT_TRACKER_NAME,
        logger: Optional[FilteringBoundLogger] = None,
    ):
        try:
            self.target_reference = weakref.ref(target)
        except TypeError:
            type_name = type(target).__name__
            raise BindingError(
                f"'{type_name}' instances cannot be tracked: weak references are not supported",
                target_type=type_name,
            ) from None

        self.store = store
        self.tracker_name = tracker_name
        self.logger = logger or get_tracking_logger(__name__)
        self.key: Optional[str] = None
        self.tracked_properties: dict[str, TrackedPropertyDescriptor] = {}
        self.auto_persist_enabled = True

        self.applying_property = Event()
        self.state_applied = Event()
        self.persisting_property = Event()
        self.state_persisted = Event()

        self._target_type_name = type(target).__name__
        self._applied = False
        self._subscriptions: list[TriggerSubscription] = []

        if isinstance(target, PersistRequestSource):
            self._subscriptions.append(
                subscribe_to_event(target, "persist_requested", self._on_persist_requested)
            )

    def __repr__(self) -> str:
        return (
            f"TrackingConfiguration(type={self._target_type_name!r}, key={self.key!r}, "
            f"properties={list(self.tracked_properties)!r}, alive={self.is_alive})"
        )

    @property
    def target(self) -> Optional[Any]:
        """The tracked object, or None if it has been collected."""
        return self.target_reference()

    @property
    def is_alive(self) -> bool:
        return self.target_reference() is not None

    @property
    def target_type_name(self) -> str:
        return self._target_type_name

    @property
    def has_applied_once(self) -> bool:
        return self._applied

    @property
    def trigger_subscriptions(self) -> tuple[TriggerSubscription, ...]:
        return tuple(self._subscriptions)

    # -- building -----------------------------------------------------------

    def add_property(self, name: str, default: Any = MISSING) -> "TrackingConfiguration":
        """Track attribute ``name``, optionally with a fallback default."""
        self.tracked_properties[name] = create_descriptor(self._require_target(), name, default)
        return self

    def add_properties(self, *names: str) -> "TrackingConfiguration":
        target = self._require_target()
        for name in names:
            self.tracked_properties[name] = create_descriptor(target, name)
        return self

    def remove_properties(self, *names: str) -> "TrackingConfiguration":
        for name in names:
            self.tracked_properties.pop(name, None)
        return self

    def identify_as(self, key: Optional[str]) -> "TrackingConfiguration":
        self.key = key
        return self

    def set_auto_persist_enabled(self, should_auto_persist: bool) -> "TrackingConfiguration":
        self.auto_persist_enabled = should_auto_persist
        return self

    def register_persist_trigger(self, event_name: str, source: Any = None) -> "TrackingConfiguration":
        """
        Persist whenever ``event_name`` fires on ``source`` (default: the target).

        Firings before the first :meth:`apply` are ignored so that initial
        values never overwrite saved state.

        Raises:
            BindingError: If the source has no such event
        """
        if source is None:
            source = self._require_target()

        self._subscriptions.append(
            subscribe_to_event(source, event_name, self._on_trigger_fired)
        )
        return self

    def clear_persist_triggers(self) -> "TrackingConfiguration":
        """Detach every trigger subscription held by this configuration."""
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.unsubscribe()
        return self

    # -- apply / persist ----------------------------------------------------

    def apply(self) -> None:
        """Load stored values into the target."""
        target = self.target
        if target is None:
            return

        for property_name, descriptor in list(self.tracked_properties.items()):
            started = time.perf_counter()
            key = self.construct_property_key(property_name)
            self._apply_property(target, key, descriptor)
            self.logger.debug(
                "Applied property",
                property_key=key,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 3),
            )

        self.state_applied.fire(self, None)
        self._applied = True

    def persist(self) -> None:
        """Write the target's current values into the store."""
        target = self.target
        if target is None:
            return

        for property_name, descriptor in list(self.tracked_properties.items()):
            key = self.construct_property_key(property_name)
            try:
                value = descriptor.getter(target)
                value = self._on_persisting_property(property_name, value)
                self.store.persist(value, key)
            except OperationVetoed:
                self.logger.debug("Persist vetoed", property_key=key)
            except Exception as e:
                log_property_failure(self.logger, "persist", key, e)

        self.state_persisted.fire(self, None)

    def clear_saved_state(self) -> "TrackingConfiguration":
        """Remove every tracked property's stored value."""
        for property_name in list(self.tracked_properties):
            key = self.construct_property_key(property_name)
            try:
                self.store.remove(key)
            except Exception as e:
                log_property_failure(self.logger, "clear", key, e)
        return self

    def construct_property_key(self, property_name: str) -> str:
        """Storage key: ``<TypeName>_<key>.<property>``."""
        return f"{self._target_type_name}_{self.key or ''}.{property_name}"

    # -- internals ----------------------------------------------------------

    def _apply_property(self, target: Any, key: str, descriptor: TrackedPropertyDescriptor) -> None:
        try:
            if self.store.contains_key(key):
                value = self._on_applying_property(descriptor.name, self.store.retrieve(key))
                descriptor.setter(target, value)
                return
        except OperationVetoed:
            self.logger.debug("Apply vetoed", property_key=key)
            return
        except Exception as e:
            log_property_failure(self.logger, "apply", key, e)

        if descriptor.is_default_specified:
            try:
                descriptor.setter(target, descriptor.default_value)
            except Exception as e:
                log_property_failure(self.logger, "apply", key, e, context={"default": True})

    def _on_applying_property(self, property_name: str, value: Any) -> Any:
        if not self.applying_property:
            return value
        args = TrackingOperationEventArgs(self, property_name, value)
        self.applying_property.fire(self, args)
        if args.cancel:
            raise OperationVetoed(property_name, "apply")
        return args.value

    def _on_persisting_property(self, property_name: str, value: Any) -> Any:
        if not self.persisting_property:
            return value
        args = TrackingOperationEventArgs(self, property_name, value)
        self.persisting_property.fire(self, args)
        if args.cancel:
            raise OperationVetoed(property_name, "persist")
        return args.value

    def _on_trigger_fired(self, *args: Any, **kwargs: Any) -> None:
        if self._applied:
            self.persist()

    def _on_persist_requested(self, *args: Any, **kwargs: Any) -> None:
        self.persist()

    def _require_target(self) -> Any:
        target = self.target
        if target is None:
            raise BindingError(
                f"'{self._target_type_name}' target is no longer alive",
                target_type=self._target_type_name,
            )
        return target
