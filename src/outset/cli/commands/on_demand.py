"""On-demand processing and its cleanup."""

import click

from outset.cli.ensure import Ensure
from outset.core.cleanup import path_cleanup
from outset.core.context import OutsetContext
from outset.core.pipeline import process_items


@click.command("on-demand")
@click.pass_obj
def on_demand_cmd(ctx: OutsetContext) -> None:
    """Run everything in the on-demand folder as the current user."""
    process_items(ctx, ctx.paths.on_demand)


@click.command("cleanup")
@click.pass_obj
def cleanup_cmd(ctx: OutsetContext) -> None:
    """Empty the on-demand folder once its items have run."""
    Ensure.root(ctx, "clean up on-demand items")
    path_cleanup(ctx.filesystem, ctx.paths.on_demand)
