"""Removal of processed items."""

import logging
from pathlib import Path

from outset.core.filesystem.abc import Filesystem

logger = logging.getLogger(__name__)


def delete_file(filesystem: Filesystem, path: Path) -> bool:
    """Remove path, logging instead of raising on failure."""
    try:
        filesystem.remove(path)
    except OSError as e:
        logger.error("%s could not be removed: %s", path, e)
        return False
    return True


def path_cleanup(filesystem: Filesystem, path: Path) -> None:
    """Delete a single item, or every immediate child of a directory.

    A child that cannot be removed is logged and the rest are still removed.
    """
    if filesystem.is_dir(path):
        for child in filesystem.list_dir(path):
            delete_file(filesystem, child)
    elif filesystem.exists(path):
        delete_file(filesystem, path)
    else:
        logger.error("%s doesn't seem to exist", path)
