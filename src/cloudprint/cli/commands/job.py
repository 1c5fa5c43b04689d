"""Job management commands."""

import json
import mimetypes
import pathlib
import sys
import typing

import cyclopts
from rich.table import Table

from cloudprint import consts, exceptions
from cloudprint.cli import common

job_app = cyclopts.App(name="job", help="Job management")


@job_app.command(name="submit")
def job_submit(
    document: typing.Annotated[str, cyclopts.Parameter(help="Path of the file to print, or a URL")],
    printer: typing.Annotated[
        str | None, cyclopts.Parameter(name="--printer", help="Printer ID (defaults to configured printer)")
    ] = None,
    title: typing.Annotated[str | None, cyclopts.Parameter(name="--title", help="Job title")] = None,
    content_type: typing.Annotated[
        str | None,
        cyclopts.Parameter(name="--content-type", help="MIME type, or 'url' to let the service fetch DOCUMENT"),
    ] = None,
    ticket: typing.Annotated[
        str | None, cyclopts.Parameter(name="--ticket", help="Print ticket as a JSON document")
    ] = None,
):
    """Submit a document to a printer."""
    common.logger.debug("Command started", command="job submit", document=document, printer=printer)
    printer_id = common.resolve_printer_id(printer)

    ticket_data = None
    if ticket:
        try:
            ticket_data = json.loads(ticket)
        except json.JSONDecodeError as e:
            common.output_message(f"[bold red]Error:[/bold red] --ticket is not valid JSON: {e}", error=True)
            sys.exit(1)

    content: bytes | str
    if content_type == consts.URL_CONTENT_TYPE:
        content = document
    else:
        path = pathlib.Path(document)
        if not path.is_file():
            common.output_message(f"[bold red]Error:[/bold red] File not found: {path}", error=True)
            sys.exit(1)
        content = path.read_bytes()
        if content_type is None:
            content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"

    client = common.get_client()
    try:
        job_id = client.submit_print_job(
            printer_id,
            title or pathlib.Path(document).name,
            content,
            content_type,
            ticket=ticket_data,
        )
    except exceptions.PrintSubmitFailedError as e:
        common.output_message(f"[bold red]Print job rejected[/bold red] ({e.code}): {e.message}", error=True)
        sys.exit(1)

    common.output_message(f"[green]Submitted job {job_id}[/green]")


@job_app.command(name="list")
def job_list(
    printer: typing.Annotated[str | None, cyclopts.Parameter(name="--printer", help="Filter by Printer ID")] = None,
    status: typing.Annotated[
        list[str] | None, cyclopts.Parameter(name="--status", help="Filter by job status (e.g. QUEUED, DONE)")
    ] = None,
):
    """List the jobs of the account (first page only)."""
    common.logger.debug("Command started", command="job list", printer=printer, status=status)
    client = common.get_client()
    jobs = client.list_jobs()

    if printer:
        jobs = [j for j in jobs if j.printer_id == printer]
    if status:
        wanted = {s.upper() for s in status}
        jobs = [j for j in jobs if j.status in wanted]

    table = Table(title="Jobs")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="blue")
    table.add_column("Printer", style="magenta")
    table.add_column("Status", style="green")

    for j in jobs:
        table.add_row(j.id, j.title or "N/A", j.printer_name or j.printer_id or "Unknown", j.status)

    common.console.print(table)


def jobs_alias(
    printer: typing.Annotated[str | None, cyclopts.Parameter(name="--printer", help="Filter by Printer ID")] = None,
    status: typing.Annotated[list[str] | None, cyclopts.Parameter(name="--status", help="Filter by status")] = None,
):
    """List jobs (alias for 'job list')."""
    job_list(printer=printer, status=status)


@job_app.command(name="status")
def job_status(
    job_id: typing.Annotated[str, cyclopts.Parameter(help="Job ID")],
):
    """Show the status of a job."""
    common.logger.debug("Command started", command="job status", job_id=job_id)
    client = common.get_client()
    print(client.get_job_status(job_id))
