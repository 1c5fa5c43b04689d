"""Exceptions for the Cloud Print library.

How to use the most important parts:
- `CloudPrintError`: Catch this base exception to handle all client errors.
- `NotAuthenticatedError`: Raised before any network call when no credential is set.
- `PrintSubmitFailedError`: Inspect `code` and `message` to see why the service rejected a job.
"""


class CloudPrintError(Exception):
    """Base exception for all Cloud Print library errors."""


class NotAuthenticatedError(CloudPrintError):
    """Raised when an authenticated operation is attempted without a credential."""


class InvalidArgumentError(CloudPrintError, ValueError):
    """Raised when a required argument is missing or empty."""


class TransportError(CloudPrintError):
    """Raised when the HTTP call fails (network, timeout, non-2xx status)."""

    def __init__(self, message: str, status_code: int | None = None, response_body: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Error description.
            status_code: HTTP status code, if a response was received.
            response_body: Raw response body from the server, truncated.
        """
        if status_code is not None:
            message = f"[{status_code}] {message}"
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class MalformedResponseError(CloudPrintError):
    """Raised when a response is not valid JSON or lacks an expected field."""


class PrintSubmitFailedError(CloudPrintError):
    """Raised when the service explicitly rejects a print job."""

    def __init__(self, code: str | None, message: str | None) -> None:
        """Initialize the error with the service's error code and message."""
        super().__init__(f"Print job rejected ({code}): {message}")
        self.code = code
        self.message = message
