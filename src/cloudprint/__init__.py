"""Google Cloud Print Client SDK.

This package provides a Python client for the Cloud Print API.

How to use the most important parts:
- `CloudPrintClient`: Exposes the REST interface: list printers, submit jobs and poll their status.
- `cloudprint.auth`: Helpers to turn an OAuth refresh token into the bearer token the client needs.
- `cloudprint.exceptions`: The error hierarchy, rooted at `CloudPrintError`.
"""

import logging

import structlog

# Set default library logging level to WARNING if the user hasn't configured structlog
if not structlog.is_configured():
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))

from cloudprint.__version__ import __version__
from cloudprint.client import CloudPrintClient
from cloudprint.exceptions import (
    CloudPrintError,
    InvalidArgumentError,
    MalformedResponseError,
    NotAuthenticatedError,
    PrintSubmitFailedError,
    TransportError,
)
from cloudprint.models import UNKNOWN_JOB_STATUS, Job, JobStatus, Printer
from cloudprint.transport import HttpTransport, RequestsTransport

__all__ = [
    "UNKNOWN_JOB_STATUS",
    "CloudPrintClient",
    "CloudPrintError",
    "HttpTransport",
    "InvalidArgumentError",
    "Job",
    "JobStatus",
    "MalformedResponseError",
    "NotAuthenticatedError",
    "PrintSubmitFailedError",
    "Printer",
    "RequestsTransport",
    "TransportError",
    "__version__",
]
