"""Real command execution using subprocess."""

import shlex
import subprocess
from pathlib import Path

from outset.core.shell.abc import CommandResult, Shell

# Exit status a POSIX shell reports when a command cannot be executed
EXIT_CANNOT_EXECUTE = 126

SCRIPT_SHELL = "/bin/zsh"


class RealShell(Shell):
    """Production implementation using subprocess.run()."""

    def run_command(self, command: list[str]) -> CommandResult:
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            return CommandResult(stdout="", stderr=str(e), exit_code=EXIT_CANNOT_EXECUTE)
        return CommandResult(stdout=result.stdout, stderr=result.stderr, exit_code=result.returncode)

    def run_script(self, script: Path) -> CommandResult:
        return self.run_command([SCRIPT_SHELL, "-c", shlex.quote(str(script))])
