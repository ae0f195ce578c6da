"""Default configuration parameters for state tracking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TrackerParams:
    """Managing session parameters."""
    name: str = "default"                   # Tracker identity matched against hints
    auto_persist_enabled: bool = True       # Initial advisory flag for new configurations


@dataclass(frozen=True)
class StoreParams:
    """Backing store selection."""
    backend: str = "memory"                 # "memory" or "sqlite"
    db_path: str = "statekeep.db"           # Used by the sqlite backend


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    tracker: TrackerParams
    store: StoreParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        tracker=TrackerParams(),
        store=StoreParams(),
        logging=LoggingParams(),
    )
