"""No-op wrapper for package installation."""

import logging
from pathlib import Path

from outset.core.installer.abc import BOOT_VOLUME, Installer
from outset.core.shell.abc import CommandResult

logger = logging.getLogger(__name__)


class DryRunInstaller(Installer):
    """Logs the package that would be installed and reports success."""

    def install(self, package: Path, target: str = BOOT_VOLUME) -> CommandResult:
        logger.info("[dry-run] Would install %s onto %s", package, target)
        return CommandResult(stdout="", stderr="", exit_code=0)
