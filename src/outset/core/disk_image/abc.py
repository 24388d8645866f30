"""Disk image attach/detach interface."""

from abc import ABC, abstractmethod
from pathlib import Path


class DiskImage(ABC):
    """Abstract interface over disk image mounting."""

    @abstractmethod
    def mount(self, image: Path) -> Path:
        """Attach image without browsing, verifying or auto-opening it.

        Args:
            image: Path to the .dmg

        Returns:
            Mount point of the attached volume

        Raises:
            RuntimeError: If the image cannot be attached or exposes no volume
        """
        ...

    @abstractmethod
    def detach(self, mount_point: Path) -> str:
        """Force-detach a mounted volume.

        Args:
            mount_point: Mount point returned by mount()

        Returns:
            Status text reported by the detach

        Raises:
            RuntimeError: If the volume cannot be detached
        """
        ...
