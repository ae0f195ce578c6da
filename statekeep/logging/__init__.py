"""
Logging configuration and utilities for the state tracking engine.
"""
from .config import (
    add_subsystem,
    configure_logging,
    get_logger,
    get_tracking_logger,
    log_property_failure,
)

__all__ = [
    "add_subsystem",
    "configure_logging",
    "get_logger",
    "get_tracking_logger",
    "log_property_failure",
]
