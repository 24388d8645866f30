"""Tests for host preparation helpers."""

import logging
from pathlib import Path

import pytest

from outset.core.host import (
    LAUNCHCTL,
    LOGINWINDOW_PLIST,
    NETWORK_POLL_INTERVAL,
    disable_loginwindow,
    enable_loginwindow,
    ensure_shared_folder,
    ensure_working_folders,
    sys_report,
    wait_for_network,
)
from outset.core.paths import OutsetPaths
from outset.core.shell.abc import CommandResult
from tests.fakes.context import create_test_context
from tests.fakes.filesystem import ROOT_SCRIPT, FakeFilesystem
from tests.fakes.network import FakeNetwork
from tests.fakes.shell import FakeShell
from tests.fakes.system_info import FakeSystemInfo
from tests.fakes.time import FakeTime

ROOT = Path("/usr/local/outset")


def test_ensure_working_folders_creates_missing_ones() -> None:
    paths = OutsetPaths.for_root(ROOT)
    fs = FakeFilesystem(directories={paths.boot_every: ROOT_SCRIPT})
    ctx = create_test_context(filesystem=fs, paths=paths)

    ensure_working_folders(ctx)

    assert paths.boot_every not in fs.created_paths
    assert fs.created_paths == [p for p in paths.working_directories if p != paths.boot_every]
    assert all(fs.is_dir(p) for p in paths.working_directories)


def test_ensure_working_folders_logs_failures_and_continues(
    caplog: pytest.LogCaptureFixture,
) -> None:
    paths = OutsetPaths.for_root(ROOT)
    fs = FakeFilesystem(uncreatable={paths.boot_once})
    ctx = create_test_context(filesystem=fs, paths=paths)

    with caplog.at_level(logging.ERROR, logger="outset"):
        ensure_working_folders(ctx)

    assert f"Could not create path at {paths.boot_once}" in caplog.text
    assert paths.on_demand in fs.created_paths


def test_ensure_shared_folder_only_when_missing() -> None:
    paths = OutsetPaths.for_root(ROOT)
    fs = FakeFilesystem()
    ctx = create_test_context(filesystem=fs, paths=paths)

    ensure_shared_folder(ctx)
    ensure_shared_folder(ctx)

    assert fs.created_paths == [paths.share]


def test_wait_for_network_returns_immediately_when_up() -> None:
    time = FakeTime()
    ctx = create_test_context(network=FakeNetwork(up_after=0), time=time)

    assert wait_for_network(ctx, 180) is True
    assert time.sleep_calls == []


def test_wait_for_network_polls_until_up() -> None:
    time = FakeTime()
    network = FakeNetwork(up_after=3)
    ctx = create_test_context(network=network, time=time)

    assert wait_for_network(ctx, 180) is True
    assert network.probe_count == 4
    assert time.sleep_calls == [NETWORK_POLL_INTERVAL] * 3


def test_wait_for_network_gives_up_after_timeout() -> None:
    time = FakeTime()
    ctx = create_test_context(network=FakeNetwork(up_after=None), time=time)

    assert wait_for_network(ctx, 25) is False
    assert time.sleep_calls == [10, 10, 5]
    assert sum(time.sleep_calls) == 25


def test_wait_for_network_zero_timeout_probes_once() -> None:
    time = FakeTime()
    network = FakeNetwork(up_after=None)
    ctx = create_test_context(network=network, time=time)

    assert wait_for_network(ctx, 0) is False
    assert network.probe_count == 1
    assert time.sleep_calls == []


def test_loginwindow_toggling_uses_launchctl() -> None:
    shell = FakeShell()
    ctx = create_test_context(shell=shell)

    disable_loginwindow(ctx)
    enable_loginwindow(ctx)

    assert shell.command_calls == [
        [LAUNCHCTL, "unload", LOGINWINDOW_PLIST],
        [LAUNCHCTL, "load", LOGINWINDOW_PLIST],
    ]


def test_loginwindow_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    shell = FakeShell(results={LAUNCHCTL: CommandResult("", "Operation not permitted", 1)})
    ctx = create_test_context(shell=shell)

    with caplog.at_level(logging.ERROR, logger="outset"):
        disable_loginwindow(ctx)

    assert "launchctl unload of loginwindow failed: Operation not permitted" in caplog.text


def test_sys_report_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    ctx = create_test_context(system_info=FakeSystemInfo(build_version=None))

    with caplog.at_level(logging.DEBUG, logger="outset"):
        sys_report(ctx)

    assert "Model: Mac14,2" in caplog.text
    assert "Serial: C02TEST0001" in caplog.text
    assert "OS: 14.4.1" in caplog.text
    assert "Build: unavailable" in caplog.text
