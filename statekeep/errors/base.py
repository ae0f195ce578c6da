"""
Base error classes shared by the whole package.

``TrackingError`` carries a context dictionary and a ``recoverable`` flag;
the specific failures in ``binding`` and ``runtime`` build on it.
"""

from typing import Any, Optional


class TrackingError(Exception):
    """Base class for every error raised by the tracking engine."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class SettingsError(TrackingError):
    """Tracker settings failed validation."""

    def __init__(self, message: str, errors: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
