"""Command execution interface.

Scripts are run to completion and judged only by their exit code; the core
never interprets their output beyond logging it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of a finished command."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0


class Shell(ABC):
    """Abstract interface for running commands synchronously."""

    @abstractmethod
    def run_command(self, command: list[str]) -> CommandResult:
        """Run command, wait for it, and capture its output.

        A command that cannot be started at all is reported as a failed
        CommandResult rather than raised, so one bad script cannot stop the
        items after it.

        Args:
            command: Program and arguments

        Returns:
            CommandResult with stdout, stderr and exit code
        """
        ...

    @abstractmethod
    def run_script(self, script: Path) -> CommandResult:
        """Run an item script through the login shell.

        Scripts without a shebang line are interpreted by the shell instead of
        failing to execute.

        Args:
            script: Path of the script to run

        Returns:
            CommandResult with stdout, stderr and exit code
        """
        ...
