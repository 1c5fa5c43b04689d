import pytest

from cloudprint import CloudPrintClient
from cloudprint.exceptions import NotAuthenticatedError


@pytest.fixture
def anonymous_client(transport):
    return CloudPrintClient(transport=transport)


def test_credential_defaults_to_empty(anonymous_client):
    assert anonymous_client.get_credential() == ""


def test_set_credential_is_chainable(anonymous_client):
    assert anonymous_client.set_credential("tok") is anonymous_client
    assert anonymous_client.get_credential() == "tok"


def test_credential_can_be_replaced(client):
    client.set_credential("new-token")
    assert client.get_credential() == "new-token"


@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.list_printers(),
        lambda c: c.submit_print_job("p1", "t", b"data", "application/pdf"),
        lambda c: c.get_job_status("J1"),
        lambda c: c.list_jobs(),
    ],
)
def test_operations_require_credential(anonymous_client, transport, call):
    with pytest.raises(NotAuthenticatedError):
        call(anonymous_client)

    assert transport.requests == []


def test_missing_credential_wins_over_missing_printer(anonymous_client, transport):
    with pytest.raises(NotAuthenticatedError):
        anonymous_client.submit_print_job("", "t", b"data", "application/pdf")
    assert transport.requests == []


def test_clients_do_not_share_credentials(transport):
    first = CloudPrintClient(credential="a", transport=transport)
    second = CloudPrintClient(transport=transport)
    assert first.get_credential() == "a"
    assert second.get_credential() == ""


def test_bearer_header_uses_current_credential(client, transport):
    transport.queue('{"printers": []}').queue('{"printers": []}')

    client.list_printers()
    client.set_credential("rotated")
    client.list_printers()

    assert transport.requests[0]["headers"] == {"Authorization": "Bearer mock_token"}
    assert transport.requests[1]["headers"] == {"Authorization": "Bearer rotated"}
