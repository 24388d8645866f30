import click

from outset.cli.commands.boot import boot_cmd
from outset.cli.commands.login import (
    login_cmd,
    login_every_cmd,
    login_once_cmd,
    login_privileged_cmd,
)
from outset.cli.commands.on_demand import cleanup_cmd, on_demand_cmd
from outset.cli.commands.preferences import (
    add_ignored_user_cmd,
    add_override_cmd,
    remove_ignored_user_cmd,
    remove_override_cmd,
)
from outset.cli.commands.status import status_cmd
from outset.cli.commands.sysreport import sysreport_cmd
from outset.cli.logging_config import configure_logging
from outset.core.context import OutsetContext, create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="outset")
@click.option("--debug", is_flag=True, envvar="OUTSET_DEBUG", help="Log debug output.")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Log what would be run, installed or deleted without doing it.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool) -> None:
    """Run scripts and packages at boot, login or on demand."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run)
    outset_ctx: OutsetContext = ctx.obj
    configure_logging(debug=debug, log_dir=outset_ctx.paths.logs)


cli.add_command(boot_cmd)
cli.add_command(login_cmd)
cli.add_command(login_privileged_cmd)
cli.add_command(login_every_cmd)
cli.add_command(login_once_cmd)
cli.add_command(on_demand_cmd)
cli.add_command(cleanup_cmd)
cli.add_command(add_ignored_user_cmd)
cli.add_command(remove_ignored_user_cmd)
cli.add_command(add_override_cmd)
cli.add_command(remove_override_cmd)
cli.add_command(status_cmd)
cli.add_command(sysreport_cmd)


def main() -> None:
    """CLI entry point used by the `outset` console script."""
    cli()
