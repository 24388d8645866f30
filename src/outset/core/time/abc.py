"""Time operations abstraction for testing.

This module provides an ABC for clock operations (sleep, now) to enable
fast, deterministic tests that neither sleep nor depend on the wall clock.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Sleep for specified number of seconds.

        Args:
            seconds: Number of seconds to sleep
        """
        ...

    @abstractmethod
    def now(self) -> datetime:
        """Current time as a timezone-aware UTC datetime."""
        ...
