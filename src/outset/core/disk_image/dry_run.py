"""No-op wrapper for disk image operations."""

import logging
from pathlib import Path

from outset.core.disk_image.abc import DiskImage

logger = logging.getLogger(__name__)


class DryRunDiskImage(DiskImage):
    """Logs attach/detach requests without touching hdiutil.

    mount() returns the volume path the image would most likely get, which
    will not exist, so no package is found inside it.
    """

    def mount(self, image: Path) -> Path:
        logger.info("[dry-run] Would attach %s", image)
        return Path("/Volumes") / image.stem

    def detach(self, mount_point: Path) -> str:
        logger.info("[dry-run] Would detach %s", mount_point)
        return ""
