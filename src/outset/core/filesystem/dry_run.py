"""No-op wrapper for filesystem mutations."""

import logging
from pathlib import Path

from outset.core.filesystem.abc import FileAttributes, Filesystem

logger = logging.getLogger(__name__)


class DryRunFilesystem(Filesystem):
    """No-op wrapper that prevents removal and directory creation.

    Read operations are delegated to the wrapped implementation. Mutations
    are logged and skipped.
    """

    def __init__(self, wrapped: Filesystem) -> None:
        """Create a dry-run wrapper around a Filesystem implementation.

        Args:
            wrapped: The Filesystem implementation to wrap (usually RealFilesystem)
        """
        self._wrapped = wrapped

    # Read-only operations: delegate to wrapped implementation

    def exists(self, path: Path) -> bool:
        return self._wrapped.exists(path)

    def is_dir(self, path: Path) -> bool:
        return self._wrapped.is_dir(path)

    def attributes(self, path: Path) -> FileAttributes:
        return self._wrapped.attributes(path)

    def list_dir(self, path: Path) -> list[Path]:
        return self._wrapped.list_dir(path)

    # Destructive operations: log instead of executing

    def remove(self, path: Path) -> None:
        logger.info("[dry-run] Would remove %s", path)

    def make_dirs(self, path: Path) -> None:
        logger.info("[dry-run] Would create directory %s", path)
