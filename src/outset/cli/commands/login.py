"""Login-time processing."""

import logging

import click

from outset.cli.ensure import Ensure
from outset.core.context import OutsetContext
from outset.core.host import sys_report
from outset.core.pipeline import process_items
from outset.core.preferences import Preferences

logger = logging.getLogger(__name__)


def _is_ignored(ctx: OutsetContext, prefs: Preferences) -> bool:
    if ctx.user_name in prefs.ignored_users:
        logger.info("%s is an ignored user, skipping login items", ctx.user_name)
        return True
    return False


@click.command("login")
@click.pass_obj
def login_cmd(ctx: OutsetContext) -> None:
    """Run login-once items not yet run for this user, then login-every items."""
    sys_report(ctx)
    prefs = ctx.preferences_store.load()
    if _is_ignored(ctx, prefs):
        return
    process_items(ctx, ctx.paths.login_once, once=True, overrides=prefs.override_login_once)
    process_items(ctx, ctx.paths.login_every)


@click.command("login-privileged")
@click.pass_obj
def login_privileged_cmd(ctx: OutsetContext) -> None:
    """Run the root-run login folders on behalf of the console user."""
    Ensure.root(ctx, "process privileged login items")
    sys_report(ctx)
    prefs = ctx.preferences_store.load()
    if _is_ignored(ctx, prefs):
        return
    process_items(
        ctx,
        ctx.paths.login_privileged_once,
        once=True,
        overrides=prefs.override_login_once,
    )
    process_items(ctx, ctx.paths.login_privileged_every)


@click.command("login-every")
@click.pass_obj
def login_every_cmd(ctx: OutsetContext) -> None:
    """Run login-every items only."""
    process_items(ctx, ctx.paths.login_every)


@click.command("login-once")
@click.pass_obj
def login_once_cmd(ctx: OutsetContext) -> None:
    """Run login-once items only."""
    prefs = ctx.preferences_store.load()
    process_items(ctx, ctx.paths.login_once, once=True, overrides=prefs.override_login_once)
