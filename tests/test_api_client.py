import asyncio
import json

import httpx
import pytest

from highfive.client.api import ApiClient, describe_failure
from highfive.client.errors import AuthFailure, NetworkFailure, ValidationFailure


def make_client(handler, **kwargs):
    return ApiClient("http://testserver", transport=httpx.MockTransport(handler), **kwargs)


def test_get_decodes_json_and_sends_bearer_token():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json=[{"id": "1", "title": "Launched v2"}])

    async def scenario():
        client = make_client(handler, token="abc")
        try:
            return await client.request("/api/activity")
        finally:
            await client.aclose()

    data = asyncio.run(scenario())

    assert data == [{"id": "1", "title": "Launched v2"}]
    assert seen["auth"] == "Bearer abc"


def test_post_sends_json_body():
    seen = {}

    def handler(request):
        seen["content_type"] = request.headers.get("Content-Type")
        seen["body"] = json.loads(request.content)
        seen["method"] = request.method
        return httpx.Response(201, json={"id": "9", **seen["body"]})

    async def scenario():
        client = make_client(handler)
        try:
            return await client.request("/api/activity", "POST", {"type": "project", "title": "x"})
        finally:
            await client.aclose()

    data = asyncio.run(scenario())

    assert seen["method"] == "POST"
    assert seen["content_type"] == "application/json"
    assert seen["body"] == {"type": "project", "title": "x"}
    assert data["id"] == "9"


def test_no_content_returns_none():
    async def scenario():
        client = make_client(lambda request: httpx.Response(204))
        try:
            return await client.request("/api/team/1", "DELETE")
        finally:
            await client.aclose()

    assert asyncio.run(scenario()) is None


def test_non_2xx_raises_with_body_as_message():
    def handler(request):
        return httpx.Response(409, json={"detail": "This email is already used by Ada."})

    async def scenario():
        client = make_client(handler)
        try:
            await client.request("/api/team", "POST", {"name": "Bob"})
        finally:
            await client.aclose()

    with pytest.raises(NetworkFailure) as info:
        asyncio.run(scenario())

    assert info.value.status_code == 409
    assert "already used by Ada" in info.value.message
    assert describe_failure(info.value) == "This email is already used by Ada."


def test_plain_text_error_body_is_described_verbatim():
    async def scenario():
        client = make_client(lambda request: httpx.Response(500, text="Internal Server Error"))
        try:
            await client.request("/api/services")
        finally:
            await client.aclose()

    with pytest.raises(NetworkFailure) as info:
        asyncio.run(scenario())

    assert describe_failure(info.value) == "Internal Server Error"


def test_unauthorized_notifies_and_drops_token():
    expired = []

    async def scenario():
        client = make_client(
            lambda request: httpx.Response(401, json={"detail": "Could not validate credentials"}),
            token="old",
            on_unauthorized=lambda: expired.append(True)
        )
        try:
            await client.request("/api/applications")
        finally:
            token = client.token
            await client.aclose()
        return token

    with pytest.raises(AuthFailure):
        asyncio.run(scenario())

    assert expired == [True]


def test_unauthorized_without_session_does_not_notify():
    expired = []

    async def scenario():
        client = make_client(
            lambda request: httpx.Response(401, json={"detail": "Invalid login credentials"}),
            on_unauthorized=lambda: expired.append(True)
        )
        try:
            await client.request("/auth/login", "POST", {"email": "a@b.c", "password": "x"})
        finally:
            await client.aclose()

    with pytest.raises(AuthFailure):
        asyncio.run(scenario())

    assert expired == []


def test_transport_error_becomes_network_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async def scenario():
        client = make_client(handler)
        try:
            await client.request("/api/team")
        finally:
            await client.aclose()

    with pytest.raises(NetworkFailure) as info:
        asyncio.run(scenario())

    assert info.value.status_code is None
    assert "connection refused" in describe_failure(info.value)


def test_describe_failure_for_validation_errors():
    error = ValidationFailure("Please fill in: title", fields=["title"])

    assert describe_failure(error) == "Please fill in: title"
    assert error.to_dict() == {
        "error": "ValidationFailure",
        "message": "Please fill in: title",
        "fields": ["title"],
    }


def test_describe_failure_reads_fastapi_validation_detail():
    error = NetworkFailure(
        "raw",
        status_code=422,
        body={"detail": [{"loc": ["body", "rating"], "msg": "Input should be less than or equal to 5"}]}
    )

    assert describe_failure(error) == "Input should be less than or equal to 5"


def test_success_with_non_json_body_raises_network_failure():
    def handler(request):
        return httpx.Response(200, text="<html>Gateway page</html>", headers={"Content-Type": "text/plain"})

    async def scenario():
        client = make_client(handler)
        try:
            await client.request("/api/team", "POST", {"name": "Ravi"})
        finally:
            await client.aclose()

    with pytest.raises(NetworkFailure) as exc:
        asyncio.run(scenario())

    assert exc.value.message == "Invalid JSON response"
    assert exc.value.status_code == 200
    assert exc.value.body == "<html>Gateway page</html>"
