"""Package installer interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from outset.core.shell.abc import CommandResult

BOOT_VOLUME = "/"


class Installer(ABC):
    """Abstract interface over the system package installer."""

    @abstractmethod
    def install(self, package: Path, target: str = BOOT_VOLUME) -> CommandResult:
        """Install a flat or bundle package onto target.

        Args:
            package: Path to a .pkg or .mpkg
            target: Volume to install onto

        Returns:
            CommandResult of the installer run
        """
        ...
