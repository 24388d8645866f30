"""Boot-time processing."""

import logging

import click

from outset.cli.ensure import Ensure
from outset.core.context import OutsetContext
from outset.core.host import (
    disable_loginwindow,
    enable_loginwindow,
    ensure_working_folders,
    sys_report,
    wait_for_network,
)
from outset.core.pipeline import process_items

logger = logging.getLogger(__name__)


@click.command("boot")
@click.pass_obj
def boot_cmd(ctx: OutsetContext) -> None:
    """Run boot-once items (deleting them) and then boot-every items.

    When wait_for_network is set and there is something to run, the login
    window is held back while waiting for the network and processing.
    """
    Ensure.root(ctx, "process boot items")
    ensure_working_folders(ctx)
    sys_report(ctx)

    has_items = bool(
        ctx.filesystem.list_dir(ctx.paths.boot_once) or ctx.filesystem.list_dir(ctx.paths.boot_every)
    )
    if not has_items:
        logger.debug("No boot items to process")
        return

    prefs = ctx.preferences_store.load()
    if not prefs.wait_for_network:
        _process_boot_folders(ctx)
        return

    disable_loginwindow(ctx)
    try:
        if not wait_for_network(ctx, prefs.network_timeout):
            logger.error(
                "Network was not reachable after %d seconds, continuing anyway",
                prefs.network_timeout,
            )
        _process_boot_folders(ctx)
    finally:
        enable_loginwindow(ctx)


def _process_boot_folders(ctx: OutsetContext) -> None:
    process_items(ctx, ctx.paths.boot_once, delete_items=True)
    process_items(ctx, ctx.paths.boot_every)
