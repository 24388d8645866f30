"""Per-item run/skip decisions, execution and cleanup.

Packages and scripts go through the same once/override logic and differ only
in how they are executed. Every failure here is item-level: it is logged and
the next item is processed.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from enum import Enum
from pathlib import Path

from outset.core.cleanup import path_cleanup
from outset.core.context import OutsetContext
from outset.core.disk_image.abc import DiskImage
from outset.core.filesystem.abc import Filesystem
from outset.core.items import INSTALLER_PACKAGE_EXTENSIONS, Item, extension_of
from outset.core.run_record import RunRecord, normalize_timestamp

logger = logging.getLogger(__name__)

# Give the installer time to let go of the volume before it is detached
DETACH_DELAY_SECONDS = 5

Executor = Callable[[OutsetContext, Item], bool]


class RunDecision(Enum):
    RUN = "run"
    OVERRIDE = "override"
    SKIP = "skip"


def decide(
    key: str,
    *,
    once: bool,
    record: Mapping[str, datetime],
    overrides: Mapping[str, datetime],
) -> RunDecision:
    """Decide whether an item runs in this invocation.

    Outside once-mode every item runs. In once-mode an unrecorded item runs;
    a recorded one runs again only if its override is strictly newer than the
    recorded completion time.
    """
    if not once or key not in record:
        return RunDecision.RUN
    override = overrides.get(key)
    if override is not None and normalize_timestamp(override) > normalize_timestamp(record[key]):
        return RunDecision.OVERRIDE
    return RunDecision.SKIP


def run_script(ctx: OutsetContext, item: Item) -> bool:
    result = ctx.shell.run_script(item.path)
    if not result.success:
        logger.error("%s exited with %d: %s", item.path, result.exit_code, result.stderr.strip())
        return False
    if result.stdout.strip():
        logger.info(result.stdout.strip())
    return True


def find_installer_package(filesystem: Filesystem, mount_point: Path) -> Path | None:
    """First .pkg/.mpkg at the root of a mounted volume."""
    for child in filesystem.list_dir(mount_point):
        if extension_of(child) in INSTALLER_PACKAGE_EXTENSIONS:
            return child
    return None


def _detach_quietly(disk_image: DiskImage, mount_point: Path) -> None:
    logger.info("Detaching %s", mount_point)
    try:
        status = disk_image.detach(mount_point)
    except RuntimeError as e:
        logger.error("Could not detach %s: %s", mount_point, e)
        return
    if status:
        logger.info(status)


def schedule_detach(ctx: OutsetContext, mount_point: Path) -> None:
    ctx.scheduler.call_later(
        DETACH_DELAY_SECONDS, lambda: _detach_quietly(ctx.disk_image, mount_point)
    )


def install_package(ctx: OutsetContext, item: Item) -> bool:
    """Install a pkg/mpkg, or the first package inside a dmg.

    A mounted disk image is always scheduled for detach, whatever the
    installation outcome.
    """
    if extension_of(item.path) != "dmg":
        return _run_installer(ctx, item.path)

    logger.info("Attaching %s", item.path)
    try:
        mount_point = ctx.disk_image.mount(item.path)
    except RuntimeError as e:
        logger.error("Could not attach %s: %s", item.path, e)
        return False

    try:
        if ctx.dry_run:
            logger.info("[dry-run] Would install the first package in %s", mount_point)
            return True
        package = find_installer_package(ctx.filesystem, mount_point)
        if package is None:
            logger.error("No package found at the root of %s", item.path)
            return False
        return _run_installer(ctx, package)
    finally:
        schedule_detach(ctx, mount_point)


def _run_installer(ctx: OutsetContext, package: Path) -> bool:
    logger.info("Installing %s", package)
    result = ctx.installer.install(package)
    if not result.success:
        logger.error("Installing %s failed: %s", package, result.stderr.strip())
        return False
    if result.stdout.strip():
        logger.info(result.stdout.strip())
    return True


def install_profile(ctx: OutsetContext, item: Item) -> bool:
    """Profiles cannot be installed; always reports not installed."""
    logger.info("Profile installation is not supported, leaving %s in place", item.path)
    return False


def dispatch_item(
    ctx: OutsetContext,
    item: Item,
    execute: Executor,
    *,
    once: bool,
    delete_items: bool,
    record: RunRecord,
    overrides: Mapping[str, datetime],
) -> None:
    """Run one item if due, record success in once-mode, then clean it up.

    Deletion happens whether or not the item succeeded.
    """
    decision = decide(item.key, once=once, record=record, overrides=overrides)
    if decision is RunDecision.SKIP:
        logger.debug("%s has already run, skipping", item.path)
    else:
        if decision is RunDecision.OVERRIDE:
            logger.info("Override found for %s, running again", item.path)
        succeeded = execute(ctx, item)
        if once and succeeded:
            record[item.key] = ctx.time.now()

    if delete_items:
        path_cleanup(ctx.filesystem, item.path)


def dispatch_items(
    ctx: OutsetContext,
    items: list[Item],
    execute: Executor,
    *,
    once: bool,
    delete_items: bool,
    record: RunRecord,
    overrides: Mapping[str, datetime],
) -> None:
    for item in items:
        dispatch_item(
            ctx,
            item,
            execute,
            once=once,
            delete_items=delete_items,
            record=record,
            overrides=overrides,
        )
