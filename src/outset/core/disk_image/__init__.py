"""Disk image subpackage."""

from outset.core.disk_image.abc import DiskImage
from outset.core.disk_image.dry_run import DryRunDiskImage
from outset.core.disk_image.real import RealDiskImage, parse_mount_point

__all__ = [
    "DiskImage",
    "DryRunDiskImage",
    "RealDiskImage",
    "parse_mount_point",
]
