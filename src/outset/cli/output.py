"""Output utilities for CLI commands with clear intent.

Human-facing messages go to stderr, machine-readable data to stdout, so
JSON output can be piped while progress is still visible.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write machine-readable data to stdout."""
    click.echo(message, nl=nl)
