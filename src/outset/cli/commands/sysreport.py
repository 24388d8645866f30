"""System report command."""

import click

from outset.cli.output import user_output
from outset.core.context import OutsetContext


@click.command("sysreport")
@click.pass_obj
def sysreport_cmd(ctx: OutsetContext) -> None:
    """Print hardware model, serial number and OS version."""
    info = ctx.system_info
    for label, query in (
        ("Model", info.hardware_model),
        ("Serial", info.serial_number),
        ("OS", info.os_version),
        ("Build", info.build_version),
    ):
        try:
            value = query()
        except RuntimeError:
            value = click.style("unavailable", fg="red")
        user_output(f"{click.style(label + ':', bold=True)} {value}")
