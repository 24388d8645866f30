"""Network reachability interface."""

from abc import ABC, abstractmethod


class Network(ABC):
    """Abstract network reachability probe."""

    @abstractmethod
    def is_up(self) -> bool:
        """Return True if a default route is reachable without dialing a connection."""
        ...
