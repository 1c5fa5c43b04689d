"""Main entry point for the CLI."""

import sys
import typing

import cyclopts

from cloudprint import __version__
from cloudprint.cli import common
from cloudprint.cli.commands import auth, job, printer

# Define the App
app = cyclopts.App(
    name="gcpctl",
    help="Google Cloud Print CLI",
    version=__version__,
    version_flags=["--version"],
    help_flags=["--help"],
)

# Mount Sub-Apps
app.command(printer.printer_app)
app.command(job.job_app)
app.command(auth.auth_app)

# Register Aliases
app.command(printer.printers_alias, name="printers")
app.command(job.jobs_alias, name="jobs")


@app.meta.default
def entry_point(
    *tokens: typing.Annotated[str, cyclopts.Parameter(show=False, allow_leading_hyphen=True)],
    verbose: typing.Annotated[
        bool, cyclopts.Parameter(name=["--verbose", "-v"], help="Enable verbose logging")
    ] = False,
    debug: typing.Annotated[bool, cyclopts.Parameter(name=["--debug"], help="Enable debug logging")] = False,
):
    """Main entry point handling global flags."""
    common.configure_logging(verbose, debug)
    app(tokens)


def main(args: list[str] | None = None):
    """Main entry point."""
    if args is None:
        args = sys.argv[1:]

    try:
        app.meta(args)
    except cyclopts.exceptions.CycloptsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        from cloudprint import exceptions

        if isinstance(e, exceptions.TransportError):
            print(f"Network Error: {e}", file=sys.stderr)
            if e.response_body:
                print(f"Details: {e.response_body}", file=sys.stderr)
        elif isinstance(e, exceptions.CloudPrintError):
            print(f"Error: {e}", file=sys.stderr)
        else:
            print(f"Unexpected Error: {e}", file=sys.stderr)
            common.logger.exception("An unexpected error occurred")
        sys.exit(1)


if __name__ == "__main__":
    main()
