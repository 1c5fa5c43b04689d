"""Authentication helpers for Cloud Print.

The client itself only needs a bearer token. These helpers build the OAuth payloads
that `CloudPrintClient.exchange_refresh_token` posts to a token endpoint.

How to use the most important parts:
- `refresh_token_fields`: Build the Google ``refresh_token`` grant.
- `access_token_from_refresh`: One-call helper returning a ready-to-use access token.
"""

from __future__ import annotations

import typing

import structlog

from cloudprint import consts

if typing.TYPE_CHECKING:
    from cloudprint.client import CloudPrintClient

logger = structlog.get_logger(__name__)


def refresh_token_fields(client_id: str, client_secret: str, refresh_token: str) -> dict[str, str]:
    """Build the POST fields of an OAuth2 ``refresh_token`` grant.

    Args:
        client_id: OAuth client id of your application.
        client_secret: OAuth client secret of your application.
        refresh_token: A refresh token previously issued for the Cloud Print scope.

    Returns:
        A dictionary suitable for `CloudPrintClient.exchange_refresh_token`.
    """
    return {
        "client_id": client_id,
        "client_secret": client_secret,
        "refresh_token": refresh_token,
        "grant_type": "refresh_token",
    }


def access_token_from_refresh(
    client: CloudPrintClient,
    client_id: str,
    client_secret: str,
    refresh_token: str,
    token_url: str = consts.TOKEN_URL,
) -> str:
    """Exchange a refresh token and store the resulting access token on the client.

    Returns:
        The new access token.
    """
    logger.debug("Refreshing access token...", token_url=token_url)
    token = client.exchange_refresh_token(token_url, refresh_token_fields(client_id, client_secret, refresh_token))
    client.set_credential(token)
    logger.info("Access token obtained.")
    return token
