from outset.core.time.abc import Time
from outset.core.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
