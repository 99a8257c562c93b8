"""RecordStoreClient: request building and (data, error) results.

The requests session is replaced by a stub that records calls and
returns canned responses, so no server is needed.
"""

import json

import pytest
import requests

from record_store_client import RecordStoreClient


def _response(status_code, body=None):
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = "http://records.test"
    resp._content = json.dumps(body).encode("utf-8") if body is not None else b""
    return resp


class StubSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def make_client():
    def _make(**kwargs):
        session = StubSession(**kwargs)
        return RecordStoreClient(base_url="http://records.test/", session=session), session

    return _make


def test_create_record_posts_payload(make_client):
    client, session = make_client(response=_response(201, {"id": 3, "author": "X"}))

    data, error = client.create_record(3, "X")

    assert error is None
    assert data == {"id": 3, "author": "X"}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://records.test/records"
    assert call["json"] == {"id": 3, "author": "X"}


def test_list_records_returns_list(make_client):
    records = [{"id": 1, "author": "Jane Doe"}]
    client, _ = make_client(response=_response(200, records))
    assert client.list_records() == (records, None)


def test_list_records_error_returns_empty_list(make_client):
    client, _ = make_client(response=_response(500, {"err": "internal error"}))
    data, error = client.list_records()
    assert data == []
    assert error["status_code"] == 500
    assert error["message"] == "internal error"


def test_update_record_sends_new_id_in_body(make_client):
    client, session = make_client(response=_response(200, {"id": 9, "author": "Y"}))

    data, error = client.update_record(1, 9, "Y")

    assert error is None
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"].endswith("/records/1")
    assert session.calls[0]["json"] == {"id": 9, "author": "Y"}


def test_not_found_is_reported_with_id(make_client):
    client, _ = make_client(response=_response(404, {"id": 7, "err": "record not found"}))

    data, error = client.get_record(7)

    assert data is None
    assert error == {"status_code": 404, "message": "record not found", "id": 7}


def test_delete_record_uses_delete_method(make_client):
    client, session = make_client(response=_response(200, {"id": 2, "author": "Patrick Star"}))
    data, _ = client.delete_record(2)
    assert data["author"] == "Patrick Star"
    assert session.calls[0]["method"] == "DELETE"


def test_transport_failure_has_no_status(make_client):
    client, _ = make_client(exc=requests.ConnectionError("refused"))

    data, error = client.get_record(1)

    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]
