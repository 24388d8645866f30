"""Status command implementation."""

import click
from rich.console import Console
from rich.table import Table

from outset.cli.json_output import RunRecordEntry, StatusResponse, emit_model
from outset.cli.output import user_output
from outset.core.context import OutsetContext
from outset.core.dispatcher import RunDecision, decide


def build_status(ctx: OutsetContext) -> StatusResponse:
    """Collect the run-record and what the next once-mode run would do."""
    record = ctx.run_record_store.load(ctx.run_once_file)
    overrides = ctx.preferences_store.load().override_login_once
    entries = []
    for path, last_run in sorted(record.items()):
        decision = decide(path, once=True, record=record, overrides=overrides)
        entries.append(
            RunRecordEntry(
                path=path,
                last_run=last_run,
                override=overrides.get(path),
                next_login="override" if decision is RunDecision.OVERRIDE else "skip",
            )
        )
    return StatusResponse(
        run_once_file=str(ctx.run_once_file), user=ctx.user_name, entries=entries
    )


@click.command("status")
@click.option("--json", "as_json", is_flag=True, help="Output the run-record as JSON.")
@click.pass_obj
def status_cmd(ctx: OutsetContext, as_json: bool) -> None:
    """Show which once-items have run and which will run again."""
    status = build_status(ctx)
    if as_json:
        emit_model(status)
        return

    if not status.entries:
        user_output(f"No once-items recorded in {status.run_once_file}")
        return

    table = Table(show_header=True, header_style="bold", title=status.run_once_file)
    table.add_column("item", style="cyan", no_wrap=True)
    table.add_column("last run (UTC)", no_wrap=True)
    table.add_column("override", no_wrap=True)
    table.add_column("next login", no_wrap=True)
    for entry in status.entries:
        override = entry.override.strftime("%Y-%m-%d %H:%M:%S") if entry.override else "-"
        next_login = (
            "[yellow]run again[/yellow]" if entry.next_login == "override" else "[dim]skip[/dim]"
        )
        table.add_row(
            entry.path,
            entry.last_run.strftime("%Y-%m-%d %H:%M:%S"),
            override,
            next_login,
        )

    # Output table to stderr (consistent with user_output convention)
    console = Console(stderr=True, width=200, force_terminal=True)
    console.print(table)
