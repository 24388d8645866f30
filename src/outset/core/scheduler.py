"""Delayed background work.

Disk images are detached a few seconds after their package installs so the
installer has released them. Nothing waits on that work, so the scheduler
only needs to fire a callable later.
"""

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable


class Scheduler(ABC):
    """Abstract interface for fire-and-forget delayed calls."""

    @abstractmethod
    def call_later(self, delay: float, func: Callable[[], None]) -> None:
        """Run func on a background thread after delay seconds.

        The caller never learns the outcome; func must handle its own errors.
        """
        ...


class ThreadingScheduler(Scheduler):
    """Production scheduler backed by threading.Timer.

    Timers are non-daemon so pending detaches still run before the
    interpreter exits.
    """

    def call_later(self, delay: float, func: Callable[[], None]) -> None:
        timer = threading.Timer(delay, func)
        timer.daemon = False
        timer.start()
