"""Subprocess execution with rich error context.

Used by integrations whose callers need to abort with a readable message
when a system tool fails (hdiutil, sysctl, ioreg, stat).
"""

import subprocess
from collections.abc import Sequence


def run_subprocess_with_context(
    cmd: Sequence[str], operation_context: str
) -> subprocess.CompletedProcess[str]:
    """Run a system tool to completion and return its decoded output.

    Args:
        cmd: Command and arguments to execute
        operation_context: What the command does, completing "Failed to ..."

    Returns:
        CompletedProcess with text stdout and stderr

    Raises:
        RuntimeError: If the command exits non-zero or its binary is missing
    """
    try:
        return subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8", check=True)
    except subprocess.CalledProcessError as e:
        message = f"Failed to {operation_context}"
        message += f"\nCommand: {' '.join(cmd)}"
        message += f"\nExit code: {e.returncode}"
        if e.stderr and e.stderr.strip():
            message += f"\nstderr: {e.stderr.strip()}"
        raise RuntimeError(message) from e
    except FileNotFoundError as e:
        raise RuntimeError(
            f"Command not found while trying to {operation_context}: {cmd[0]}"
        ) from e
