import json

import pytest

from cloudprint import consts
from cloudprint.exceptions import MalformedResponseError, TransportError


def test_list_printers_request(client, transport):
    transport.queue('{"printers": []}')

    client.list_printers()

    assert transport.requests == [
        {
            "method": "GET",
            "url": consts.PRINTERS_SEARCH_URL,
            "headers": {"Authorization": "Bearer mock_token"},
            "data": None,
        }
    ]


@pytest.mark.parametrize("body", ['{"printers": null}', "{}", '{"success": true}', "null", ""])
def test_no_printers_is_empty_list(client, transport, body):
    transport.queue(body)
    assert client.list_printers() == []


def test_missing_owner_name_is_tolerated(client, transport):
    transport.queue(
        json.dumps(
            {"printers": [{"id": "p1", "name": "n", "displayName": "d", "connectionStatus": "ONLINE"}]}
        )
    )

    printers = client.list_printers()

    assert len(printers) == 1
    assert printers[0].id == "p1"
    assert printers[0].name == "n"
    assert printers[0].display_name == "d"
    assert printers[0].connection_status == "ONLINE"
    assert printers[0].owner_name is None


def test_printer_order_is_preserved(client, transport):
    raw = [{"id": pid, "name": pid} for pid in ["z", "a", "m"]]
    transport.queue(json.dumps({"printers": raw}))

    assert [p.id for p in client.list_printers()] == ["z", "a", "m"]


def test_extra_printer_fields_are_ignored(client, transport):
    transport.queue(
        json.dumps({"printers": [{"id": "p1", "name": "n", "capabilities": {"color": True}, "tags": ["a"]}]})
    )

    printer = client.list_printers()[0]
    assert printer.id == "p1"
    assert not hasattr(printer, "capabilities")


def test_invalid_json_is_malformed(client, transport):
    transport.queue("<html>Error 500</html>")

    with pytest.raises(MalformedResponseError, match="not valid JSON"):
        client.list_printers()


def test_printer_without_id_is_malformed(client, transport):
    transport.queue(json.dumps({"printers": [{"name": "n"}]}))

    with pytest.raises(MalformedResponseError):
        client.list_printers()


def test_non_object_body_is_malformed(client, transport):
    transport.queue("[1, 2]")

    with pytest.raises(MalformedResponseError, match="Expected a JSON object"):
        client.list_printers()


def test_transport_errors_propagate(client, transport):
    def fail():
        raise TransportError("boom")

    transport.send = fail

    with pytest.raises(TransportError, match="boom"):
        client.list_printers()
