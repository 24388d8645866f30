"""No-op wrapper for command execution."""

import logging
from pathlib import Path

from outset.core.shell.abc import CommandResult, Shell

logger = logging.getLogger(__name__)


class DryRunShell(Shell):
    """Logs each command instead of running it and reports success."""

    def run_command(self, command: list[str]) -> CommandResult:
        logger.info("[dry-run] Would run %s", " ".join(command))
        return CommandResult(stdout="", stderr="", exit_code=0)

    def run_script(self, script: Path) -> CommandResult:
        logger.info("[dry-run] Would run script %s", script)
        return CommandResult(stdout="", stderr="", exit_code=0)
