"""Administrative edits to the shared preferences."""

import dataclasses
from pathlib import Path

import click

from outset.cli.ensure import Ensure
from outset.cli.output import user_output
from outset.core.context import OutsetContext
from outset.core.host import ensure_shared_folder
from outset.core.preferences import Preferences


def _save(ctx: OutsetContext, prefs: Preferences) -> None:
    ensure_shared_folder(ctx)
    Ensure.invariant(
        ctx.preferences_store.save(prefs),
        f"Could not write preferences to {ctx.preferences_store.path()}",
    )


def resolve_override_path(login_once: Path, name: str) -> str:
    """Key an override by its full path inside the login-once folder."""
    path = Path(name)
    if path.is_relative_to(login_once):
        return str(path)
    return str(login_once / name)


@click.command("add-ignored-user")
@click.argument("users", nargs=-1, required=True)
@click.pass_obj
def add_ignored_user_cmd(ctx: OutsetContext, users: tuple[str, ...]) -> None:
    """Skip login processing for USERS."""
    Ensure.root(ctx, "add users to ignored_users")
    prefs = ctx.preferences_store.load()
    ignored = list(prefs.ignored_users)
    for user in users:
        if user in ignored:
            user_output(f"{user} is already ignored")
            continue
        ignored.append(user)
        user_output(f"Adding {user} to ignored users")
    _save(ctx, dataclasses.replace(prefs, ignored_users=ignored))


@click.command("remove-ignored-user")
@click.argument("users", nargs=-1, required=True)
@click.pass_obj
def remove_ignored_user_cmd(ctx: OutsetContext, users: tuple[str, ...]) -> None:
    """Resume login processing for USERS."""
    Ensure.root(ctx, "remove users from ignored_users")
    prefs = ctx.preferences_store.load()
    ignored = list(prefs.ignored_users)
    for user in users:
        if user not in ignored:
            user_output(f"{user} is not an ignored user")
            continue
        ignored.remove(user)
        user_output(f"Removing {user} from ignored users")
    _save(ctx, dataclasses.replace(prefs, ignored_users=ignored))


@click.command("add-override")
@click.argument("scripts", nargs=-1, required=True)
@click.pass_obj
def add_override_cmd(ctx: OutsetContext, scripts: tuple[str, ...]) -> None:
    """Make once-items in SCRIPTS run again at the next login.

    Names without the login-once folder prefix are resolved inside it.
    """
    Ensure.root(ctx, "add overrides")
    prefs = ctx.preferences_store.load()
    overrides = dict(prefs.override_login_once)
    now = ctx.time.now()
    for script in scripts:
        key = resolve_override_path(ctx.paths.login_once, script)
        overrides[key] = now
        user_output(f"Adding {key} to overrides")
    _save(ctx, dataclasses.replace(prefs, override_login_once=overrides))


@click.command("remove-override")
@click.argument("scripts", nargs=-1, required=True)
@click.pass_obj
def remove_override_cmd(ctx: OutsetContext, scripts: tuple[str, ...]) -> None:
    """Drop the overrides for SCRIPTS."""
    Ensure.root(ctx, "remove overrides")
    prefs = ctx.preferences_store.load()
    overrides = dict(prefs.override_login_once)
    for script in scripts:
        key = resolve_override_path(ctx.paths.login_once, script)
        if overrides.pop(key, None) is None:
            user_output(f"No override for {key}")
            continue
        user_output(f"Removing {key} from overrides")
    _save(ctx, dataclasses.replace(prefs, override_login_once=overrides))
