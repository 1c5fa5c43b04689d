"""Cloud Print CLI package.

This module provides a command-line tool `gcpctl` used to interact with the Cloud Print API.
"""

from cloudprint.cli.common import console, get_client, logger
from cloudprint.cli.main import app, main

__all__ = [
    "app",
    "console",
    "get_client",
    "logger",
    "main",
]
