import json

import pytest
import requests

from person_directory_client import PersonDirectoryClient


def _response(status_code, body=None, text=None):
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = "http://testserver"
    if body is not None:
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    elif text is not None:
        resp._content = text.encode("utf-8")
        resp.headers["Content-Type"] = "text/plain; charset=utf-8"
    else:
        resp._content = b""
    return resp


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def make_client():
    def _make(*responses):
        session = FakeSession(*responses)
        return PersonDirectoryClient(base_url="http://testserver/", session=session), session

    return _make


def test_create_person_posts_json(make_client):
    client, session = make_client(_response(200, {"id": 1, "name": "Ana"}))

    person, error = client.create_person("Ana")

    assert error is None
    assert person == {"id": 1, "name": "Ana"}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://testserver/persons"
    assert call["json"] == {"name": "Ana"}
    assert call["timeout"] == 15


def test_list_persons(make_client):
    client, session = make_client(_response(200, [{"id": 1, "name": "Ana"}]))
    persons, error = client.list_persons()
    assert error is None
    assert persons == [{"id": 1, "name": "Ana"}]


def test_welcome_returns_text(make_client):
    client, _ = make_client(_response(200, text="Welcome to our service!"))
    greeting, error = client.welcome()
    assert error is None
    assert greeting == "Welcome to our service!"


def test_not_found_reports_detail(make_client):
    client, _ = make_client(_response(404, {"detail": "Person not found"}))

    person, error = client.get_person(99)

    assert person is None
    assert error == {"status_code": 404, "message": "Person not found"}


def test_update_person_uses_put(make_client):
    client, session = make_client(_response(200, {"id": 3, "name": "Bia"}))
    person, error = client.update_person(3, "Bia")
    assert error is None
    assert person == {"id": 3, "name": "Bia"}
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"] == "http://testserver/persons/3"


def test_delete_person_succeeds_on_empty_204(make_client):
    client, session = make_client(_response(204))
    ok, error = client.delete_person(5)
    assert ok is True
    assert error is None
    assert session.calls[0]["method"] == "DELETE"


def test_server_error_with_plain_body(make_client):
    client, _ = make_client(_response(500, text="boom"))
    persons, error = client.list_persons()
    assert persons == []
    assert error == {"status_code": 500, "message": "boom"}


def test_transport_failure(make_client):
    client, _ = make_client(requests.ConnectionError("connection refused"))
    ok, error = client.delete_person(1)
    assert ok is False
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
