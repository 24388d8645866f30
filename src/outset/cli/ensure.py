"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from typing import TYPE_CHECKING

import click

from outset.cli.output import user_output

if TYPE_CHECKING:
    from outset.core.context import OutsetContext


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def root(ctx: "OutsetContext", reason: str) -> None:
        """Ensure the process runs as root.

        Args:
            ctx: Application context carrying the effective identity
            reason: What root is needed for, completing "Must be root to ..."

        Raises:
            SystemExit: If not running as root (with exit code 1)
        """
        Ensure.invariant(ctx.is_root, f"Must be root to {reason}")
