"""HTTP transport used by the Cloud Print client.

How to use the most important parts:
- `HttpTransport`: The protocol the client talks to. Implement it to route calls through
  your own HTTP stack, or to stub the network in tests.
- `RequestsTransport`: The default implementation, backed by a `requests.Session`.
"""

import collections.abc
import typing

import requests
import structlog

from cloudprint import consts, exceptions
from cloudprint.__version__ import __version__

logger = structlog.get_logger(__name__)


class HttpTransport(typing.Protocol):
    """Protocol describing a single-request HTTP collaborator.

    A transport with POST data set sends a form-encoded POST, otherwise a GET.
    """

    def set_url(self, url: str) -> None:
        """Set the target URL of the next request."""
        ...

    def set_headers(self, headers: collections.abc.Mapping[str, str]) -> None:
        """Set extra request headers for the next request."""
        ...

    def set_post_data(self, fields: collections.abc.Mapping[str, typing.Any]) -> None:
        """Set the form fields for the next request, turning it into a POST."""
        ...

    def send(self) -> None:
        """Perform the request, blocking until a response arrives.

        Raises:
            exceptions.TransportError: On network failure, timeout or a non-2xx status.
        """
        ...

    def get_response(self) -> str:
        """Return the body of the last response as text."""
        ...


class RequestsTransport:
    """`HttpTransport` implementation backed by `requests`.

    Headers and POST data are consumed by `send()`; the URL stays until replaced.
    """

    def __init__(self, timeout: float = consts.DEFAULT_TIMEOUT, session: requests.Session | None = None) -> None:
        """Initializes the transport.

        Args:
            timeout: Timeout in seconds for every request.
            session: Optional pre-configured session (proxies, certificates, ...).
        """
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": f"cloudprint-python/{__version__}",
                "Accept": "application/json",
            }
        )
        self._url: str | None = None
        self._headers: dict[str, str] = {}
        self._post_data: dict[str, typing.Any] | None = None
        self._response: str = ""

    def set_url(self, url: str) -> None:
        """Set the target URL of the next request."""
        self._url = url

    def set_headers(self, headers: collections.abc.Mapping[str, str]) -> None:
        """Set extra request headers for the next request."""
        self._headers = dict(headers)

    def set_post_data(self, fields: collections.abc.Mapping[str, typing.Any]) -> None:
        """Set the form fields for the next request."""
        self._post_data = dict(fields)

    def send(self) -> None:
        """Perform the request and store the response body.

        Raises:
            exceptions.TransportError: On connection/timeout issues or non-2xx statuses.
        """
        if not self._url:
            raise exceptions.TransportError("No URL set for request.")

        method = "GET" if self._post_data is None else "POST"
        url = self._url
        headers, data = self._headers, self._post_data
        self._headers, self._post_data = {}, None
        self._response = ""

        try:
            logger.debug("API Request", method=method, url=url, fields=sorted(data) if data else None)
            response = self._session.request(method, url, headers=headers, data=data, timeout=self._timeout)
            logger.debug(
                "API Response",
                status_code=response.status_code,
                headers=dict(response.headers),
                body_len=len(response.content),
            )
        except requests.exceptions.RequestException as e:
            logger.error("Network error", error=str(e))
            raise exceptions.TransportError(f"Failed to connect to Cloud Print: {e}") from e

        # Redirects requests did not follow (e.g. 304) count as failures too
        if not 200 <= response.status_code < 300:
            raise exceptions.TransportError(
                f"Request failed: {response.reason}",
                status_code=response.status_code,
                response_body=response.text[:500],
            )

        self._response = response.text

    def get_response(self) -> str:
        """Return the body of the last response as text."""
        return self._response
