"""Tests for item removal."""

import logging
from pathlib import Path

import pytest

from outset.core.cleanup import delete_file, path_cleanup
from tests.fakes.filesystem import ROOT_PAYLOAD, ROOT_SCRIPT, FakeFilesystem

ON_DEMAND = Path("/usr/local/outset/on-demand")


def test_delete_file_removes_path() -> None:
    path = ON_DEMAND / "a.sh"
    fs = FakeFilesystem(files={path: ROOT_SCRIPT})

    assert delete_file(fs, path) is True
    assert not fs.exists(path)


def test_delete_file_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    path = ON_DEMAND / "locked.sh"
    fs = FakeFilesystem(files={path: ROOT_SCRIPT}, undeletable={path})

    with caplog.at_level(logging.ERROR, logger="outset"):
        assert delete_file(fs, path) is False

    assert f"{path} could not be removed" in caplog.text
    assert fs.exists(path)


def test_path_cleanup_empties_directory_but_keeps_it() -> None:
    fs = FakeFilesystem(
        files={
            ON_DEMAND / "a.sh": ROOT_SCRIPT,
            ON_DEMAND / "Tool.pkg": ROOT_PAYLOAD,
            ON_DEMAND / "bundle" / "inner.sh": ROOT_SCRIPT,
        }
    )

    path_cleanup(fs, ON_DEMAND)

    assert fs.is_dir(ON_DEMAND)
    assert fs.list_dir(ON_DEMAND) == []
    assert fs.removed_paths == [ON_DEMAND / "a.sh", ON_DEMAND / "Tool.pkg", ON_DEMAND / "bundle"]


def test_path_cleanup_continues_past_undeletable_child() -> None:
    locked = ON_DEMAND / "locked.sh"
    fs = FakeFilesystem(
        files={locked: ROOT_SCRIPT, ON_DEMAND / "b.sh": ROOT_SCRIPT},
        undeletable={locked},
    )

    path_cleanup(fs, ON_DEMAND)

    assert fs.list_dir(ON_DEMAND) == [locked]


def test_path_cleanup_missing_path_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    fs = FakeFilesystem()

    with caplog.at_level(logging.ERROR, logger="outset"):
        path_cleanup(fs, ON_DEMAND / "ghost.sh")

    assert "ghost.sh doesn't seem to exist" in caplog.text
    assert fs.removed_paths == []
