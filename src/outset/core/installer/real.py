"""Real package installation via /usr/sbin/installer."""

import subprocess
from pathlib import Path

from outset.core.installer.abc import BOOT_VOLUME, Installer
from outset.core.shell.abc import CommandResult
from outset.core.shell.real import EXIT_CANNOT_EXECUTE

INSTALLER = "/usr/sbin/installer"


class RealInstaller(Installer):
    """Production implementation calling the macOS installer tool."""

    def install(self, package: Path, target: str = BOOT_VOLUME) -> CommandResult:
        cmd = [INSTALLER, "-pkg", str(package), "-target", target]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            return CommandResult(stdout="", stderr=str(e), exit_code=EXIT_CANNOT_EXECUTE)
        return CommandResult(stdout=result.stdout, stderr=result.stderr, exit_code=result.returncode)
