"""Default initializer driven by declarative hints."""

from typing import TYPE_CHECKING

from .base import ConfigurationInitializer, TrackingAware
from .hints import find_tracking_key, iter_trackable_hints

if TYPE_CHECKING:
    from ..configuration.tracking import TrackingConfiguration


class DefaultConfigurationInitializer(ConfigurationInitializer):
    """
    Initializer used when no more specific one is registered.

    Reads the ``tracking_key`` and ``Trackable``/``trackable`` hints of the
    target's class, then lets a :class:`TrackingAware` target adjust the
    result. Subclass it with a narrower ``for_type`` to keep this behaviour
    and add type-specific steps; implement ConfigurationInitializer directly
    to drop it.
    """

    for_type = object

    def initialize_configuration(self, configuration: "TrackingConfiguration") -> None:
        target = configuration.target
        if target is None:
            return

        target_type = type(target)

        key_name = find_tracking_key(target_type)
        if key_name is not None:
            key_value = getattr(target, key_name)
            configuration.identify_as(None if key_value is None else str(key_value))

        for name, hint in iter_trackable_hints(target_type):
            # the key attribute identifies the instance, it is never tracked
            if name == key_name or not hint.applies_to(configuration.tracker_name):
                continue
            if hint.is_default_specified:
                configuration.add_property(name, hint.default)
            else:
                configuration.add_property(name)

        if isinstance(target, TrackingAware):
            target.init_configuration(configuration)
