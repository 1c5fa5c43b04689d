import json

import pytest

from cloudprint import UNKNOWN_JOB_STATUS, JobStatus, consts

JOBS = json.dumps(
    {
        "jobs": [
            {"id": "J1", "status": "IN_PROGRESS", "title": "a.pdf", "printerid": "p1"},
            {"id": "J2", "status": "DONE", "title": "b.pdf", "printerid": "p2", "printerName": "Lab"},
        ]
    }
)


def test_status_of_listed_job(client, transport):
    transport.queue(JOBS)
    assert client.get_job_status("J2") == "DONE"


def test_status_of_unlisted_job(client, transport):
    transport.queue(JOBS)

    status = client.get_job_status("J9")

    assert status == "UNKNOWN"
    assert status is UNKNOWN_JOB_STATUS


def test_status_request(client, transport):
    transport.queue(JOBS)

    client.get_job_status("J1")

    assert transport.requests == [
        {
            "method": "GET",
            "url": consts.JOBS_URL,
            "headers": {"Authorization": "Bearer mock_token"},
            "data": None,
        }
    ]


@pytest.mark.parametrize("body", ['{"jobs": null}', "{}", ""])
def test_empty_job_list(client, transport, body):
    transport.queue(body)
    assert client.get_job_status("J1") == JobStatus.UNKNOWN


def test_first_match_wins(client, transport):
    transport.queue(json.dumps({"jobs": [{"id": "J1", "status": "QUEUED"}, {"id": "J1", "status": "DONE"}]}))
    assert client.get_job_status("J1") == "QUEUED"


def test_unlisted_provider_status_is_passed_through(client, transport):
    transport.queue(json.dumps({"jobs": [{"id": "J1", "status": "SOMETHING_NEW"}]}))
    assert client.get_job_status("J1") == "SOMETHING_NEW"


def test_list_jobs_maps_fields(client, transport):
    transport.queue(JOBS)

    jobs = client.list_jobs()

    assert [j.id for j in jobs] == ["J1", "J2"]
    assert jobs[0].printer_id == "p1"
    assert jobs[0].printer_name is None
    assert jobs[1].printer_name == "Lab"
    assert jobs[1].title == "b.pdf"


def test_numeric_job_ids_match_submitted_id(client, transport):
    transport.queue(json.dumps({"success": "1", "job": {"id": 123}}))
    transport.queue(json.dumps({"jobs": [{"id": 123, "status": "DONE"}]}))

    job_id = client.submit_print_job("p1", "Doc", b"x", "application/pdf")

    assert job_id == "123"
    assert client.get_job_status(job_id) == "DONE"


def test_incomplete_records_do_not_break_lookup(client, transport):
    transport.queue(json.dumps({"jobs": [{"id": "J0"}, {"status": "QUEUED"}, {"id": "J1", "status": "DONE"}]}))

    assert client.get_job_status("J1") == "DONE"


def test_record_without_status_reads_as_empty(client, transport):
    transport.queue(json.dumps({"jobs": [{"id": "J0", "status": None}]}))

    jobs = client.list_jobs()

    assert [(j.id, j.status) for j in jobs] == [("J0", "")]
