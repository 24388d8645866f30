from outset.core.network.abc import Network
from outset.core.network.real import RealNetwork

__all__ = [
    "Network",
    "RealNetwork",
]
