"""Google Cloud Print REST API Client.

This module provides a high-level interface to the Cloud Print API,
handling bearer authentication, payload encoding, and response validation.

How to use the most important parts:
- `CloudPrintClient`: The core class. Give it an access token (or obtain one with
  `exchange_refresh_token`) and call `list_printers()`, `submit_print_job(...)` and
  `get_job_status(...)`.
- Pass a custom `transport` adhering to `cloudprint.transport.HttpTransport` to control how
  requests are made. One client instance should be used per thread.
"""

import base64
import collections.abc
import json
import typing

import pydantic

from cloudprint import consts, exceptions, models
from cloudprint.transport import HttpTransport, RequestsTransport

__all__ = ["CloudPrintClient"]

M = typing.TypeVar("M", bound=pydantic.BaseModel)


class CloudPrintClient:
    """Client for the Cloud Print API.

    Every public operation performs exactly one HTTP round trip through the transport.
    Nothing is retried; errors surface to the caller as `CloudPrintError` subclasses.

    Usage Example:
    ```python
        >>> from cloudprint import CloudPrintClient
        >>> client = CloudPrintClient(credential="ya29.a0...")
        >>> for printer in client.list_printers():
        ...     print(printer.display_name, printer.connection_status)
        >>> job_id = client.submit_print_job(printer.id, "Report", pdf_bytes, "application/pdf")
        >>> client.get_job_status(job_id)
        'QUEUED'
    ```
    """

    def __init__(
        self,
        credential: str = "",
        transport: HttpTransport | None = None,
        timeout: float = consts.DEFAULT_TIMEOUT,
    ) -> None:
        """Initializes the client.

        Args:
            credential: Optional bearer token. Can be set later with `set_credential`.
            transport: An object adhering to the `HttpTransport` protocol.
                       Defaults to a `RequestsTransport`.
            timeout: Request timeout in seconds, used only for the default transport.
        """
        self._credential = credential
        self._transport = transport if transport is not None else RequestsTransport(timeout=timeout)

    def set_credential(self, token: str) -> "CloudPrintClient":
        """Store the bearer token used for authenticated calls. No validation is performed."""
        self._credential = token
        return self

    def get_credential(self) -> str:
        """Return the stored bearer token, or an empty string if unset."""
        return self._credential

    def _auth_headers(self) -> dict[str, str]:
        if not self._credential:
            raise exceptions.NotAuthenticatedError("No credential set. Call set_credential() first.")
        return {"Authorization": f"Bearer {self._credential}"}

    def _request(
        self,
        url: str,
        headers: collections.abc.Mapping[str, str],
        post_data: collections.abc.Mapping[str, typing.Any] | None = None,
    ) -> dict[str, typing.Any]:
        """Perform one round trip and decode the JSON body.

        Raises:
            exceptions.TransportError: Propagated from the transport.
            exceptions.MalformedResponseError: If the body is not a JSON object.
        """
        self._transport.set_url(url)
        self._transport.set_headers(headers)
        if post_data is not None:
            self._transport.set_post_data(post_data)
        self._transport.send()

        body = self._transport.get_response()
        try:
            data = json.loads(body) if body else None
        except json.JSONDecodeError as e:
            raise exceptions.MalformedResponseError(f"Response from {url} is not valid JSON: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise exceptions.MalformedResponseError(f"Expected a JSON object from {url}, got {type(data).__name__}")
        return data

    @staticmethod
    def _parse(model: type[M], data: dict[str, typing.Any]) -> M:
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as e:
            raise exceptions.MalformedResponseError(f"Unexpected {model.__name__} payload: {e}") from e

    def request_access_token(
        self, token_url: str, post_fields: collections.abc.Mapping[str, typing.Any]
    ) -> models.TokenResponse:
        """POST an OAuth grant to a token endpoint and return the parsed response.

        Args:
            token_url: Full URL of the token endpoint.
            post_fields: Provider-specific grant fields (see `cloudprint.auth.refresh_token_fields`).

        Returns:
            A `TokenResponse`.

        Raises:
            exceptions.MalformedResponseError: If the body has no `access_token`.
        """
        data = self._request(token_url, {}, post_data=post_fields)
        if not data.get("access_token"):
            raise exceptions.MalformedResponseError("Token response has no access_token field.")
        return self._parse(models.TokenResponse, data)

    def exchange_refresh_token(self, token_url: str, post_fields: collections.abc.Mapping[str, typing.Any]) -> str:
        """Exchange a refresh token grant for an access token.

        The stored credential is left untouched; pass the result to `set_credential`.

        Usage Example:
        ```python
            >>> fields = auth.refresh_token_fields(client_id, client_secret, refresh_token)
            >>> client.set_credential(client.exchange_refresh_token(consts.TOKEN_URL, fields))
        ```
        """
        return self.request_access_token(token_url, post_fields).access_token

    def list_printers(self) -> list[models.Printer]:
        """Fetch all printers registered with the account, in service order.

        Returns:
            A list of `Printer` objects; empty when the account has no printers.
        """
        headers = self._auth_headers()
        data = self._request(consts.PRINTERS_SEARCH_URL, headers)
        return self._parse(models.PrinterSearchResponse, data).printers

    def submit_print_job(
        self,
        printer_id: str,
        title: str,
        content: bytes | str,
        content_type: str,
        ticket: collections.abc.Mapping[str, typing.Any] | None = None,
    ) -> str:
        """Submit a document to a printer.

        Args:
            printer_id: The printer id returned by `list_printers`.
            title: Job title shown in the print queue.
            content: Document bytes, or a URL when `content_type` is ``"url"``.
            content_type: MIME type such as ``application/pdf``, or ``"url"``.
            ticket: Optional print options (color, duplex, ...) sent as a JSON document.

        Returns:
            The id of the created job.

        Raises:
            exceptions.NotAuthenticatedError: If no credential is set.
            exceptions.InvalidArgumentError: If `printer_id` is empty.
            exceptions.PrintSubmitFailedError: If the service rejects the job.
        """
        headers = self._auth_headers()
        if not printer_id:
            raise exceptions.InvalidArgumentError("Please provide a printer id.")

        fields: dict[str, str] = {
            "printerid": printer_id,
            "title": title,
            "contentType": content_type,
        }
        if content_type == consts.URL_CONTENT_TYPE:
            fields["content"] = content.decode("utf-8") if isinstance(content, bytes) else content
        else:
            raw = content.encode("utf-8") if isinstance(content, str) else content
            fields["content"] = base64.b64encode(raw).decode("ascii")
            fields["contentTransferEncoding"] = "base64"

        if ticket:
            fields["ticket"] = json.dumps(ticket)

        data = self._request(consts.SUBMIT_URL, headers, post_data=fields)
        result = self._parse(models.SubmitResponse, data)

        if not result.success:
            raise exceptions.PrintSubmitFailedError(result.error_code, result.message)
        if not result.job_id:
            raise exceptions.MalformedResponseError("Submit response reports success but carries no job id.")
        return result.job_id

    def list_jobs(self) -> list[models.Job]:
        """Fetch the jobs of the account.

        Only the first page returned by the service is considered.
        """
        headers = self._auth_headers()
        data = self._request(consts.JOBS_URL, headers)
        return self._parse(models.JobListResponse, data).jobs

    def get_job_status(self, job_id: str) -> str:
        """Return the status of a job, or ``UNKNOWN`` when it is not in the job list.

        Usage Example:
        ```python
            >>> client.get_job_status("a1b2c3")
            'DONE'
        ```
        """
        for job in self.list_jobs():
            if job.id == job_id:
                return job.status
        return models.UNKNOWN_JOB_STATUS
