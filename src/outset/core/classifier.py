"""Partition a processing directory into packages, profiles and scripts."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from outset.core.filesystem.abc import Filesystem
from outset.core.items import Item, ItemKind, check_admission

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassifiedItems:
    """Admitted items of one directory, bucketed by kind.

    Each bucket keeps directory enumeration order.
    """

    packages: list[Item] = field(default_factory=list)
    profiles: list[Item] = field(default_factory=list)
    scripts: list[Item] = field(default_factory=list)


def classify_directory(filesystem: Filesystem, directory: Path) -> ClassifiedItems:
    """Enumerate directory (non-recursively) and bucket admitted children.

    Children that fail admission are logged and left out of every bucket, so
    they are neither run nor deleted. A directory that cannot be listed
    yields an empty result.
    """
    result = ClassifiedItems()
    buckets = {
        ItemKind.PACKAGE: result.packages,
        ItemKind.PROFILE: result.profiles,
        ItemKind.SCRIPT: result.scripts,
    }

    for path in filesystem.list_dir(directory):
        if not check_admission(filesystem, path).admitted:
            logger.error("Bad permissions: %s", path)
            continue
        item = Item.from_path(path)
        buckets[item.kind].append(item)

    return result
