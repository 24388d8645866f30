"""Tests for RealShell, RealInstaller and ThreadingScheduler on the local host."""

import subprocess
import threading
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from outset.core.installer import RealInstaller
from outset.core.scheduler import ThreadingScheduler
from outset.core.shell import DryRunShell, RealShell
from outset.core.shell.real import EXIT_CANNOT_EXECUTE, SCRIPT_SHELL


def _script(tmp_path: Path, body: str) -> Path:
    script = tmp_path / "item.sh"
    script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    script.chmod(0o755)
    return script


def test_run_command_captures_output(tmp_path: Path) -> None:
    script = _script(tmp_path, "echo configured")

    result = RealShell().run_command([str(script)])

    assert result.success
    assert result.stdout.strip() == "configured"


def test_run_command_reports_exit_code(tmp_path: Path) -> None:
    script = _script(tmp_path, "echo nope >&2\nexit 4")

    result = RealShell().run_command([str(script)])

    assert not result.success
    assert result.exit_code == 4
    assert result.stderr.strip() == "nope"


def test_run_command_unexecutable_file(tmp_path: Path) -> None:
    path = tmp_path / "plain.txt"
    path.write_text("not a program", encoding="utf-8")
    path.chmod(0o644)

    result = RealShell().run_command([str(path)])

    assert result.exit_code == EXIT_CANNOT_EXECUTE
    assert result.stderr


def test_dry_run_shell_runs_nothing(tmp_path: Path) -> None:
    marker = tmp_path / "ran"
    script = _script(tmp_path, f"touch {marker}")

    assert DryRunShell().run_script(script).success
    assert not marker.exists()


def test_real_installer_missing_tool_is_a_failure(tmp_path: Path) -> None:
    # Off macOS /usr/sbin/installer does not exist; on macOS the package is missing
    result = RealInstaller().install(tmp_path / "missing.pkg")

    assert not result.success


def test_threading_scheduler_runs_later() -> None:
    done = threading.Event()

    ThreadingScheduler().call_later(0.01, done.set)

    assert done.wait(timeout=5)


def test_run_script_goes_through_the_shell(tmp_path: Path) -> None:
    script = tmp_path / "with space.sh"
    with patch("outset.core.shell.real.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 0
        mock_result.stdout = ""
        mock_result.stderr = ""
        mock_run.return_value = mock_result

        RealShell().run_script(script)

    assert mock_run.call_args.args[0] == [SCRIPT_SHELL, "-c", f"'{script}'"]


@pytest.mark.skipif(not Path(SCRIPT_SHELL).exists(), reason=f"{SCRIPT_SHELL} not installed")
def test_run_script_without_shebang(tmp_path: Path) -> None:
    script = tmp_path / "noshebang"
    script.write_text("echo hello\n", encoding="utf-8")
    script.chmod(0o755)

    result = RealShell().run_script(script)

    assert result.success, result.stderr
    assert result.stdout.strip() == "hello"


@pytest.mark.skipif(not Path(SCRIPT_SHELL).exists(), reason=f"{SCRIPT_SHELL} not installed")
def test_run_script_reports_script_exit_code(tmp_path: Path) -> None:
    script = _script(tmp_path, "exit 3")

    assert RealShell().run_script(script).exit_code == 3
