"""Per-type registry of configuration initializers."""

from typing import Optional

from .base import ConfigurationInitializer
from .default import DefaultConfigurationInitializer


class InitializerRegistry:
    """Maps target types to initializers; ``object`` is always covered."""

    def __init__(self, default: Optional[ConfigurationInitializer] = None):
        self._initializers: dict[type, ConfigurationInitializer] = {}
        self.register(default or DefaultConfigurationInitializer())

    def register(self, initializer: ConfigurationInitializer) -> None:
        """Register ``initializer``, replacing any other for the same type."""
        self._initializers[initializer.for_type] = initializer

    def resolve(self, target_type: type) -> ConfigurationInitializer:
        """Return the initializer registered for the most specific base of ``target_type``."""
        for klass in target_type.__mro__:
            initializer = self._initializers.get(klass)
            if initializer is not None:
                return initializer
        return self._initializers[object]

    def __contains__(self, target_type: type) -> bool:
        return target_type in self._initializers
