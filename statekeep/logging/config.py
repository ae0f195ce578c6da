"""
Centralized logging configuration for the state tracking engine.

This module provides standardized logging configuration using structlog.
Tracking configurations log every per-property failure through the helpers
below so that apply/persist diagnostics share one structured format.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, FilteringBoundLogger, WrappedLogger

from ..config.defaults import LoggingParams

PACKAGE_LOGGER_PREFIX = "statekeep."


def configure_logging(
    level: str = LoggingParams.level,
    format_json: bool = LoggingParams.format_json,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Defaults come from ``LoggingParams`` so that the ``logging`` section of a
    tracker configuration can be passed straight through as keyword arguments.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        add_subsystem,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def add_subsystem(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Fill in ``subsystem`` from the logger name when nothing bound it.

    ``statekeep.store.sqlite`` logs as subsystem ``store``; loggers outside
    the package are left alone.
    """
    name = event_dict.get("logger") or ""
    if "subsystem" not in event_dict and name.startswith(PACKAGE_LOGGER_PREFIX):
        event_dict["subsystem"] = name[len(PACKAGE_LOGGER_PREFIX):].split(".", 1)[0]
    return event_dict


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_tracking_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with the tracking subsystem context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for apply/persist diagnostics
    """
    return get_logger(name).bind(subsystem="tracking")


def log_property_failure(
    logger: FilteringBoundLogger,
    operation: str,
    property_key: str,
    error: BaseException,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a single tracked property failing during apply, persist or clear.

    Args:
        logger: Structlog logger instance
        operation: "apply", "persist" or "clear"
        property_key: Full storage key of the property
        error: The exception that was caught
        context: Additional context data
    """
    bound_logger = logger.bind(
        operation=operation,
        property_key=property_key,
        error_type=type(error).__name__,
        error=str(error),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("Tracked property operation failed")
