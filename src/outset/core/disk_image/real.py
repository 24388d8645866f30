"""Real disk image operations using hdiutil."""

import plistlib
from pathlib import Path
from xml.parsers.expat import ExpatError

from outset.core.disk_image.abc import DiskImage
from outset.core.subprocess import run_subprocess_with_context

HDIUTIL = "/usr/bin/hdiutil"


def parse_mount_point(attach_output: str) -> Path | None:
    """Return the first mount point in ``hdiutil attach -plist`` output."""
    try:
        info = plistlib.loads(attach_output.encode("utf-8"))
    except (plistlib.InvalidFileException, ExpatError):
        return None
    if not isinstance(info, dict):
        return None
    for entity in info.get("system-entities", []):
        mount_point = entity.get("mount-point")
        if mount_point:
            return Path(mount_point)
    return None


class RealDiskImage(DiskImage):
    """Production implementation calling hdiutil."""

    def mount(self, image: Path) -> Path:
        result = run_subprocess_with_context(
            [HDIUTIL, "attach", "-plist", "-nobrowse", "-noverify", "-noautoopen", str(image)],
            operation_context=f"attach disk image {image}",
        )
        mount_point = parse_mount_point(result.stdout)
        if mount_point is None:
            raise RuntimeError(f"No mounted volume reported for disk image {image}")
        return mount_point

    def detach(self, mount_point: Path) -> str:
        result = run_subprocess_with_context(
            [HDIUTIL, "detach", "-force", str(mount_point)],
            operation_context=f"detach {mount_point}",
        )
        return result.stdout.strip()
