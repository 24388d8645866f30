"""Process one outset directory end to end."""

import logging
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path

from outset.core.classifier import classify_directory
from outset.core.context import OutsetContext
from outset.core.dispatcher import dispatch_items, install_package, install_profile, run_script
from outset.core.run_record import RunRecord

logger = logging.getLogger(__name__)


def process_items(
    ctx: OutsetContext,
    directory: Path,
    *,
    delete_items: bool = False,
    once: bool = False,
    overrides: Mapping[str, datetime] | None = None,
) -> None:
    """Classify, run and optionally delete the items in directory.

    Packages are handled before scripts. In once-mode the run-record is loaded
    before the first item and written once after the last; a crash in between
    means completed items may run again next time.

    Args:
        ctx: Application context
        directory: Folder to process; must exist
        delete_items: Remove each item after it was processed
        once: Run items only on first encounter unless overridden
        overrides: Path -> time; recorded items older than it run again

    Raises:
        SystemExit: If directory does not exist; nothing is processed
    """
    if not ctx.filesystem.exists(directory):
        logger.error("%s does not exist. Exiting", directory)
        raise SystemExit(1)

    override_map: Mapping[str, datetime] = overrides or {}
    items = classify_directory(ctx.filesystem, directory)
    logger.debug(
        "%s: %d packages, %d profiles, %d scripts",
        directory,
        len(items.packages),
        len(items.profiles),
        len(items.scripts),
    )

    run_once_file = ctx.run_once_file
    record: RunRecord = ctx.run_record_store.load(run_once_file) if once else {}

    dispatch_items(
        ctx,
        items.packages,
        install_package,
        once=once,
        delete_items=delete_items,
        record=record,
        overrides=override_map,
    )
    for profile in items.profiles:
        install_profile(ctx, profile)
    dispatch_items(
        ctx,
        items.scripts,
        run_script,
        once=once,
        delete_items=delete_items,
        record=record,
        overrides=override_map,
    )

    if once and record:
        ctx.run_record_store.save(run_once_file, record)
