"""
Managing session for tracking configurations.

A StateTracker owns the shared store, the tracker name used to filter
declarative hints, and the registry of configuration initializers. It
creates at most one configuration per live target and forgets it when the
target is collected.
"""

import weakref
from pathlib import Path
from typing import Any, Optional

from structlog.types import FilteringBoundLogger

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .configuration.tracking import DEFAULT_TRACKER_NAME, TrackingConfiguration
from .errors import SettingsError
from .initializers.base import ConfigurationInitializer
from .initializers.registry import InitializerRegistry
from .logging.config import configure_logging, get_tracking_logger
from .persistence.base import ObjectStore
from .persistence.memory_store import InMemoryStore
from .persistence.sqlite_store import SQLiteObjectStore


class StateTracker:
    """
    Creates and keeps tracking configurations for target objects.

    Args:
        store: Backing store shared by every configuration
        name: Tracker identity; hints scoped to another tracker are ignored
        logger: Logger handed to every configuration
        auto_persist_enabled: Initial advisory flag for new configurations
    """

    def __init__(
        self,
        store: ObjectStore,
        name: str = DEFAULT_TRACKER_NAME,
        logger: Optional[FilteringBoundLogger] = None,
        auto_persist_enabled: bool = True,
    ):
        self.store = store
        self.name = name
        self.logger = logger or get_tracking_logger(__name__)
        self.auto_persist_enabled = auto_persist_enabled
        self.initializers = InitializerRegistry()
        # keyed by id(); entries are dropped by a finalizer when the target dies
        self._configurations: dict[int, TrackingConfiguration] = {}

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "StateTracker":
        """
        Build a tracker from a merged configuration dictionary.

        A `logging` section, when present, configures structlog before the
        tracker is created.

        Raises:
            SettingsError: If the configuration does not validate
        """
        errors = ConfigValidator.validate(config)
        if errors:
            raise SettingsError(
                "Invalid tracker configuration",
                errors=[f"{error.field}: {error.message}" for error in errors],
            )

        logging_params = config.get("logging")
        if logging_params:
            configure_logging(**logging_params)

        store_params = config.get("store", {})
        if store_params.get("backend", "memory") == "sqlite":
            store: ObjectStore = SQLiteObjectStore(store_params.get("db_path", "statekeep.db"))
        else:
            store = InMemoryStore()

        tracker_params = config.get("tracker", {})
        return cls(
            store,
            name=tracker_params.get("name", DEFAULT_TRACKER_NAME),
            auto_persist_enabled=tracker_params.get("auto_persist_enabled", True),
        )

    @classmethod
    def from_config_dir(
        cls,
        config_dir: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None,
    ) -> "StateTracker":
        """
        Build a tracker from `statekeep.yaml` in `config_dir` (default: cwd).

        Defaults, the file and `overrides` are merged in that order.
        """
        loader = ConfigLoader.create(config_dir)
        return cls.from_config(loader.merge_config(overrides))

    def register_configuration_initializer(self, initializer: ConfigurationInitializer) -> None:
        self.initializers.register(initializer)

    def configure(self, target: Any) -> TrackingConfiguration:
        """Return the configuration for ``target``, creating it on first use."""
        configuration = self._configurations.get(id(target))
        if configuration is not None and configuration.target is target:
            return configuration

        configuration = TrackingConfiguration(
            target, self.store, tracker_name=self.name, logger=self.logger
        )
        configuration.set_auto_persist_enabled(self.auto_persist_enabled)
        self.initializers.resolve(type(target)).initialize_configuration(configuration)

        target_id = id(target)
        self._configurations[target_id] = configuration
        weakref.finalize(target, self._configurations.pop, target_id, None)

        self.logger.debug(
            "Tracking configuration created",
            target_type=configuration.target_type_name,
            key=configuration.key,
            properties=list(configuration.tracked_properties),
        )
        return configuration

    def track(self, target: Any) -> TrackingConfiguration:
        """Configure ``target`` and immediately apply its saved state."""
        configuration = self.configure(target)
        configuration.apply()
        return configuration

    def apply(self, target: Any) -> None:
        self.configure(target).apply()

    def persist(self, target: Any) -> None:
        self.configure(target).persist()

    def persist_all(self) -> None:
        """Persist every live tracked target."""
        for configuration in self.configurations:
            configuration.persist()

    def run_auto_persist(self) -> None:
        """Persist every live target whose configuration allows auto-persist."""
        for configuration in self.configurations:
            if configuration.auto_persist_enabled:
                configuration.persist()

    @property
    def configurations(self) -> list[TrackingConfiguration]:
        """Configurations whose targets are still alive."""
        return [c for c in list(self._configurations.values()) if c.is_alive]

    def __len__(self) -> int:
        return len(self.configurations)
