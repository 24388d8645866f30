"""Tests for classify_directory."""

import logging
from pathlib import Path

import pytest

from outset.core.classifier import classify_directory
from outset.core.filesystem.abc import FileAttributes
from tests.fakes.filesystem import ROOT_PAYLOAD, ROOT_SCRIPT, FakeFilesystem

FOLDER = Path("/usr/local/outset/boot-once")


def test_buckets_admitted_items_by_kind_in_listing_order() -> None:
    fs = FakeFilesystem(
        files={
            FOLDER / "b.sh": ROOT_SCRIPT,
            FOLDER / "Tool.pkg": ROOT_PAYLOAD,
            FOLDER / "wifi.mobileconfig": ROOT_PAYLOAD,
            FOLDER / "a.sh": ROOT_SCRIPT,
            FOLDER / "Bundle.dmg": ROOT_PAYLOAD,
        }
    )

    items = classify_directory(fs, FOLDER)

    assert [i.path.name for i in items.packages] == ["Tool.pkg", "Bundle.dmg"]
    assert [i.path.name for i in items.profiles] == ["wifi.mobileconfig"]
    assert [i.path.name for i in items.scripts] == ["b.sh", "a.sh"]
    assert len(items.packages) + len(items.profiles) + len(items.scripts) == 5


def test_rejected_items_are_logged_and_left_out(caplog: pytest.LogCaptureFixture) -> None:
    fs = FakeFilesystem(
        files={
            FOLDER / "good.sh": ROOT_SCRIPT,
            FOLDER / "writable.sh": FileAttributes(owner_id=0, mode=0o777),
            FOLDER / "user.pkg": FileAttributes(owner_id=501, mode=0o644),
        }
    )

    with caplog.at_level(logging.ERROR, logger="outset"):
        items = classify_directory(fs, FOLDER)

    assert [i.path.name for i in items.scripts] == ["good.sh"]
    assert items.packages == []
    assert f"Bad permissions: {FOLDER / 'writable.sh'}" in caplog.text
    assert f"Bad permissions: {FOLDER / 'user.pkg'}" in caplog.text


def test_does_not_descend_into_subdirectories() -> None:
    fs = FakeFilesystem(
        files={
            FOLDER / "top.sh": ROOT_SCRIPT,
            FOLDER / "nested" / "deep.sh": ROOT_SCRIPT,
        }
    )

    items = classify_directory(fs, FOLDER)

    # The nested directory itself is a root-owned 755 entry, so it counts as a script
    assert [i.path.name for i in items.scripts] == ["top.sh", "nested"]


def test_empty_directory_yields_nothing() -> None:
    fs = FakeFilesystem(directories={FOLDER: ROOT_SCRIPT})

    items = classify_directory(fs, FOLDER)

    assert (items.packages, items.profiles, items.scripts) == ([], [], [])
