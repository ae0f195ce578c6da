"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

STORE_BACKENDS = ("memory", "sqlite")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOGGING_KEYS = ("level", "format_json", "include_timestamp", "include_caller")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates merged configuration dictionaries."""

    @staticmethod
    def validate_tracker_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate tracker parameters."""
        errors = []

        if "name" in params:
            value = params["name"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="tracker.name",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "auto_persist_enabled" in params:
            value = params["auto_persist_enabled"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="tracker.auto_persist_enabled",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_store_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate store parameters."""
        errors = []

        if "backend" in params:
            value = params["backend"]
            if value not in STORE_BACKENDS:
                errors.append(ValidationError(
                    field="store.backend",
                    message=f"Must be one of: {', '.join(STORE_BACKENDS)}",
                    value=value
                ))

        if "db_path" in params:
            value = params["db_path"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="store.db_path",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        for key in params:
            if key not in LOGGING_KEYS:
                errors.append(ValidationError(
                    field=f"logging.{key}",
                    message="Unknown logging option",
                    value=params[key]
                ))

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of: {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="logging.format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @classmethod
    def validate(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration."""
        errors = []
        errors.extend(cls.validate_tracker_params(config.get("tracker", {})))
        errors.extend(cls.validate_store_params(config.get("store", {})))
        errors.extend(cls.validate_logging_params(config.get("logging", {})))
        return errors
