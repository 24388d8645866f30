"""Package installer subpackage."""

from outset.core.installer.abc import BOOT_VOLUME, Installer
from outset.core.installer.dry_run import DryRunInstaller
from outset.core.installer.real import RealInstaller

__all__ = [
    "BOOT_VOLUME",
    "DryRunInstaller",
    "Installer",
    "RealInstaller",
]
