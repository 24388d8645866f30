"""Item kinds and the ownership/permission admission check."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from outset.core.filesystem.abc import Filesystem

logger = logging.getLogger(__name__)

PACKAGE_EXTENSIONS = frozenset({"pkg", "mpkg", "dmg"})
PROFILE_EXTENSIONS = frozenset({"mobileconfig"})
INSTALLER_PACKAGE_EXTENSIONS = frozenset({"pkg", "mpkg"})

# Payloads are read by root-run installers, scripts are executed directly
PAYLOAD_MODE = 0o644
SCRIPT_MODE = 0o755
ROOT_UID = 0


class ItemKind(Enum):
    PACKAGE = "package"
    PROFILE = "profile"
    SCRIPT = "script"


def extension_of(path: Path) -> str:
    """Lower-cased extension without the leading dot."""
    return path.suffix.lower().removeprefix(".")


def kind_for_path(path: Path) -> ItemKind:
    ext = extension_of(path)
    if ext in PACKAGE_EXTENSIONS:
        return ItemKind.PACKAGE
    if ext in PROFILE_EXTENSIONS:
        return ItemKind.PROFILE
    return ItemKind.SCRIPT


@dataclass(frozen=True)
class Item:
    """A file found in a processing directory, with its kind fixed at creation."""

    path: Path
    kind: ItemKind

    @staticmethod
    def from_path(path: Path) -> "Item":
        return Item(path=path, kind=kind_for_path(path))

    @property
    def key(self) -> str:
        """Key used for this item in the run-record."""
        return str(self.path)


@dataclass(frozen=True)
class AdmissionResult:
    """Verdict of the admission check with the values it was based on.

    owner_id and mode are None when the attributes could not be read.
    """

    admitted: bool
    owner_id: int | None
    mode: int | None


def required_mode(path: Path) -> int:
    """Exact permission bits an item must carry to be admitted."""
    if kind_for_path(path) is ItemKind.SCRIPT:
        return SCRIPT_MODE
    return PAYLOAD_MODE


def check_admission(filesystem: Filesystem, path: Path) -> AdmissionResult:
    """Decide whether path is trustworthy enough to execute or install.

    Packages and profiles must be root-owned with mode 644; everything else is
    treated as a script and must be root-owned with mode 755. No other bits
    are considered.
    """
    try:
        attrs = filesystem.attributes(path)
    except OSError as e:
        logger.error("Could not read file at path %s: %s", path, e)
        return AdmissionResult(admitted=False, owner_id=None, mode=None)

    logger.debug("ownerID for %s : %d", path, attrs.owner_id)
    logger.debug("posixPermissions for %s : %o", path, attrs.mode)

    admitted = attrs.owner_id == ROOT_UID and attrs.mode == required_mode(path)
    return AdmissionResult(admitted=admitted, owner_id=attrs.owner_id, mode=attrs.mode)
