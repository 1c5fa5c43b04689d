"""Authentication commands."""

import sys

import cyclopts

from cloudprint import auth, exceptions
from cloudprint.cli import common, config
from cloudprint.client import CloudPrintClient

auth_app = cyclopts.App(name="auth", help="Manage authentication settings")


@auth_app.command(name="token")
def token_command():
    """Exchange the configured refresh token and print the access token."""
    settings = config.settings
    if not settings.can_refresh:
        common.output_message(
            "[bold red]Error:[/bold red] CLOUDPRINT_REFRESH_TOKEN, CLOUDPRINT_CLIENT_ID and "
            "CLOUDPRINT_CLIENT_SECRET must be configured.",
            error=True,
        )
        sys.exit(1)

    client = CloudPrintClient(timeout=settings.timeout)
    try:
        token = auth.access_token_from_refresh(
            client,
            settings.client_id or "",
            settings.client_secret.get_secret_value() if settings.client_secret else "",
            settings.refresh_token.get_secret_value() if settings.refresh_token else "",
            token_url=settings.token_url,
        )
    except exceptions.CloudPrintError as e:
        common.output_message(f"Token exchange failed: {e}", error=True)
        sys.exit(1)

    print(token)


@auth_app.command(name="show")
def show_command():
    """Show which credentials are configured."""
    settings = config.settings

    def state(value) -> str:
        return "[green]set[/green]" if value else "[dim]not set[/dim]"

    common.output_message(f"Access token:  {state(settings.access_token)}")
    common.output_message(f"Refresh token: {state(settings.refresh_token)}")
    common.output_message(f"Client id:     {state(settings.client_id)}")
    common.output_message(f"Client secret: {state(settings.client_secret)}")
    common.output_message(f"Token URL:     {settings.token_url}")
