"""Filesystem operations subpackage.

Provides an abstraction over filesystem access with support for testing via
fakes and dry-run via wrappers.
"""

from outset.core.filesystem.abc import FileAttributes, Filesystem
from outset.core.filesystem.dry_run import DryRunFilesystem
from outset.core.filesystem.real import RealFilesystem

__all__ = [
    "DryRunFilesystem",
    "FileAttributes",
    "Filesystem",
    "RealFilesystem",
]
