"""
Configuration-time error classifications.

These exceptions are raised while a tracking configuration is being built
(binding attributes or events by name) and are always fatal to the caller.
"""

from typing import Optional

from .base import TrackingError


class BindingError(TrackingError):
    """An attribute or event name does not resolve on the target's type."""

    def __init__(self, message: str, member_name: Optional[str] = None,
                 target_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.member_name = member_name
        self.target_type = target_type
