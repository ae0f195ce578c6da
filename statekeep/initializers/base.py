"""Configuration initializer contract and the self-configuration capability."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..configuration.tracking import TrackingConfiguration


@runtime_checkable
class TrackingAware(Protocol):
    """Target capability: adjust its own tracking configuration."""

    def init_configuration(self, configuration: "TrackingConfiguration") -> None:
        ...


class ConfigurationInitializer(ABC):
    """
    Populates a freshly created tracking configuration.

    ``for_type`` selects which targets the initializer handles; the most
    specific registered type in the target's MRO wins.
    """

    for_type: type = object

    @abstractmethod
    def initialize_configuration(self, configuration: "TrackingConfiguration") -> None:
        """Set the key and tracked properties of ``configuration``."""
        pass
