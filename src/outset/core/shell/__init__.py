"""Command execution subpackage."""

from outset.core.shell.abc import CommandResult, Shell
from outset.core.shell.dry_run import DryRunShell
from outset.core.shell.real import RealShell

__all__ = [
    "CommandResult",
    "DryRunShell",
    "RealShell",
    "Shell",
]
