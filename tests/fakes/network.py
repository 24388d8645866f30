"""Fake Network implementation for testing."""

from outset.core.network.abc import Network


class FakeNetwork(Network):
    """Network that comes up after a number of probes.

    Args:
        up_after: Probes answered "down" before answering "up";
                  None keeps the network down forever
    """

    def __init__(self, *, up_after: int | None = 0) -> None:
        self._up_after = up_after
        self._probe_count = 0

    def is_up(self) -> bool:
        self._probe_count += 1
        if self._up_after is None:
            return False
        return self._probe_count > self._up_after

    @property
    def probe_count(self) -> int:
        """This property is for test assertions only."""
        return self._probe_count
