from unittest.mock import MagicMock

import pytest
import requests

from hr_portal.api.client import ApiClient, ApiConfig
from hr_portal.api.http_base import unwrap_count, unwrap_list, unwrap_one
from hr_portal.core.exceptions import ApiError, AuthenticationError, AuthorizationError


def _response(status_code=200, body=None, content=b"{}"):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


def _client(response=None, token="tok-123"):
    session = MagicMock()
    session.headers = {}
    if response is not None:
        session.request.return_value = response
    client = ApiClient(ApiConfig("http://backend/api/", timeout=5), token_provider=lambda: token, session=session)
    return client, session


def test_request_sends_bearer_token_and_timeout():
    client, session = _client(_response(body={"tasks": []}))

    assert client.get("/tasks", params={"status": "todo"}) == {"tasks": []}

    args, kwargs = session.request.call_args
    assert args == ("GET", "http://backend/api/tasks")
    assert kwargs["headers"] == {"Authorization": "Bearer tok-123"}
    assert kwargs["params"] == {"status": "todo"}
    assert kwargs["timeout"] == 5


def test_no_token_no_authorization_header():
    client, session = _client(_response(body={}), token=None)

    client.post("/auth/login", json={"email": "a@b.c"})

    assert session.request.call_args.kwargs["headers"] == {}


def test_list_body_is_wrapped():
    client, _ = _client(_response(body=[{"id": "1"}]))

    assert client.get("/collaboration/threads") == {"data": [{"id": "1"}]}


def test_empty_body_is_empty_dict():
    client, _ = _client(_response(content=b""))

    assert client.delete("/tasks/1") == {}


def test_401_raises_authentication_error():
    client, _ = _client(_response(401, {"message": "Token expired"}))

    with pytest.raises(AuthenticationError, match="Token expired"):
        client.get("/auth/profile")


def test_403_raises_authorization_error():
    client, _ = _client(_response(403, {"error": "Admins only"}))

    with pytest.raises(AuthorizationError, match="Admins only"):
        client.get("/users")


def test_server_error_carries_status_and_message():
    client, _ = _client(_response(500, ValueError("not json"), content=b"<html>"))

    with pytest.raises(ApiError) as excinfo:
        client.get("/leaves")

    assert excinfo.value.status_code == 500
    assert str(excinfo.value) == "Request failed (500)"


def test_transport_error_is_api_error_without_status():
    client, session = _client()
    session.request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(ApiError) as excinfo:
        client.get("/holidays")

    assert excinfo.value.status_code is None


def test_get_instance_is_shared():
    first = ApiClient.get_instance(ApiConfig("http://a"))
    second = ApiClient.get_instance(ApiConfig("http://b"))

    assert first is second
    assert second._url("/users") == "http://a/users"


def test_unwrap_helpers():
    assert unwrap_one({"data": {"task": {"id": "t1"}}}, "task") == {"id": "t1"}
    assert unwrap_one({"task": {"id": "t1"}}, "task") == {"id": "t1"}
    assert unwrap_one({"data": {"id": "t1", "title": "x"}}, "task") == {"id": "t1", "title": "x"}
    assert unwrap_one({}, "task") is None

    assert unwrap_list({"data": {"users": [{"id": "1"}, None]}}, "users") == [{"id": "1"}]
    assert unwrap_list({"data": [{"id": "2"}]}, "users") == [{"id": "2"}]
    assert unwrap_count({"data": {"count": "4"}}) == 4
    assert unwrap_count({"count": None}) == 0
