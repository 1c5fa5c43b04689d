"""Printer commands."""

import fnmatch
import typing

import cyclopts
from rich.table import Table

from cloudprint.cli import common, config

printer_app = cyclopts.App(name="printer", help="Printer management")


@printer_app.command(name="list")
def printer_list(
    pattern: typing.Annotated[
        str, cyclopts.Parameter(name="--pattern", help="Glob pattern to filter names or display names")
    ] = "*",
):
    """List all printers associated with the account."""
    common.logger.debug("Command started", command="printer list", pattern=pattern)
    client = common.get_client()
    printers = client.list_printers()

    filtered = [
        p for p in printers if fnmatch.fnmatch(p.name, pattern) or fnmatch.fnmatch(p.display_name or "", pattern)
    ]

    table = Table(title="Printers")
    table.add_column("Display Name", style="cyan")
    table.add_column("ID", style="magenta")
    table.add_column("Status", style="green")
    table.add_column("Owner", style="blue")

    default_id = config.settings.default_printer_id
    for p in filtered:
        marker = " [yellow]*[/yellow]" if p.id == default_id else ""
        table.add_row(
            (p.display_name or p.name) + marker,
            p.id,
            p.connection_status or "UNKNOWN",
            p.owner_name or "N/A",
        )
    common.console.print(table)


def printers_alias(
    pattern: typing.Annotated[str, cyclopts.Parameter(name="--pattern", help="Glob pattern to filter names")] = "*",
):
    """List printers (alias for 'printer list')."""
    printer_list(pattern=pattern)


@printer_app.command(name="set-default")
def printer_set_default(
    printer_id: typing.Annotated[str, cyclopts.Parameter(help="Printer ID")],
):
    """Set the printer used when --printer is omitted."""
    config.settings.default_printer_id = printer_id
    config.save_json_config(config.settings)
    common.output_message(f"[green]Default printer set to {printer_id}[/green]")
