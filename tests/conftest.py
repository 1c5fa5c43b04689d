import os
from unittest.mock import patch

import pytest


def pytest_load_initial_conftests(early_config, parser, args):
    """Conditionally append coverage report to GITHUB_STEP_SUMMARY.

    Only applies when running in GitHub Actions.
    """
    summary_file = os.getenv("GITHUB_STEP_SUMMARY")
    if (
        os.getenv("GITHUB_ACTIONS") == "true"
        and summary_file
        and not any(arg.startswith("--cov-report=markdown-append:") for arg in args)
    ):
        args.append(f"--cov-report=markdown-append:{summary_file}")


class FakeTransport:
    """In-memory HttpTransport that records every request and replays canned bodies."""

    def __init__(self, bodies: list[str] | None = None):
        self.bodies = list(bodies or [])
        self.requests: list[dict] = []
        self._url = None
        self._headers = {}
        self._post_data = None
        self._response = ""

    def queue(self, body: str) -> "FakeTransport":
        self.bodies.append(body)
        return self

    def set_url(self, url):
        self._url = url

    def set_headers(self, headers):
        self._headers = dict(headers)

    def set_post_data(self, fields):
        self._post_data = dict(fields)

    def send(self):
        self.requests.append(
            {
                "method": "GET" if self._post_data is None else "POST",
                "url": self._url,
                "headers": self._headers,
                "data": self._post_data,
            }
        )
        self._headers, self._post_data = {}, None
        self._response = self.bodies.pop(0) if self.bodies else ""

    def get_response(self):
        return self._response


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    from cloudprint import CloudPrintClient

    return CloudPrintClient(credential="mock_token", transport=transport)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep CLI settings away from the developer's real config.json and environment."""
    import cloudprint.cli.config

    for key in list(os.environ):
        if key.startswith("CLOUDPRINT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cloudprint.cli.config, "_settings", None)
    with patch("cloudprint.cli.config.get_config_file", return_value=tmp_path / "config" / "config.json"):
        yield
