"""Shared CLI helpers and configuration."""

import logging
import sys
import typing

import better_exceptions
import structlog
from rich import console as rich_console

from cloudprint import auth, consts, exceptions
from cloudprint.client import CloudPrintClient
from cloudprint.cli import config

if typing.TYPE_CHECKING:
    from structlog.typing import Processor

# Setup
better_exceptions.hook()
console = rich_console.Console()
err_console = rich_console.Console(stderr=True)
logger = structlog.get_logger(consts.APP_NAME)


def output_message(msg: str, *, error: bool = False) -> None:
    """Print a status/error message with Rich markup (errors go to stderr)."""
    target = err_console if error else console
    target.print(msg)


def configure_logging(verbose: bool, debug: bool) -> None:
    """Route structlog to stderr; --debug wins over --verbose."""
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING

    processors: list[Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="%H:%M:%S", utc=False),
    ]

    if not sys.stderr.isatty():
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def get_client() -> CloudPrintClient:
    """Return an authenticated client.

    The configured access token wins; otherwise a refresh token grant is exchanged
    when client id, client secret and refresh token are all configured.
    """
    settings = config.settings
    client = CloudPrintClient(timeout=settings.timeout)

    if settings.access_token:
        return client.set_credential(settings.access_token.get_secret_value())

    if settings.can_refresh:
        try:
            auth.access_token_from_refresh(
                client,
                settings.client_id or "",
                settings.client_secret.get_secret_value() if settings.client_secret else "",
                settings.refresh_token.get_secret_value() if settings.refresh_token else "",
                token_url=settings.token_url,
            )
            return client
        except exceptions.CloudPrintError as e:
            logger.info("Failed to refresh access token.", error=str(e))

    output_message("Authentication required.", error=True)
    output_message(
        "Set CLOUDPRINT_ACCESS_TOKEN, or CLOUDPRINT_REFRESH_TOKEN with CLOUDPRINT_CLIENT_ID "
        "and CLOUDPRINT_CLIENT_SECRET.",
        error=True,
    )
    sys.exit(1)


def resolve_printer_id(printer_id: str | None) -> str:
    """Return the explicit printer id or the configured default, exiting if neither exists."""
    resolved = printer_id or config.settings.default_printer_id
    if not resolved:
        output_message(
            "[bold red]Error:[/bold red] No printer specified and no default configured. "
            "Use --printer or 'gcpctl printer set-default'.",
            error=True,
        )
        sys.exit(1)
    return resolved
