"""Tests for the HTTP transport."""

import json

import httpx
import pytest

from webdriver.client.transport import HttpTransport, Transport, TransportResponse
from webdriver.shared.exceptions import TransportError

URL = "http://localhost:4444/session"


def make_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_send_json_body():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"value": {"sessionId": "foobar", "capabilities": {}}})

    async with make_client(handler) as client:
        transport = HttpTransport(httpx_client=client)
        response = await transport.send("POST", URL, {"capabilities": {"alwaysMatch": {}}})

    assert response == TransportResponse(200, {"value": {"sessionId": "foobar", "capabilities": {}}})
    assert response.ok
    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {"capabilities": {"alwaysMatch": {}}}


@pytest.mark.anyio
async def test_get_without_body():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"value": "Example Domain"})

    async with make_client(handler) as client:
        response = await HttpTransport(httpx_client=client).send("GET", f"{URL}/foobar/title")

    assert response.body == {"value": "Example Domain"}
    assert seen[0].content == b""


@pytest.mark.anyio
async def test_error_status_is_returned_not_raised():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"value": {"error": "invalid session id", "message": "gone"}})

    async with make_client(handler) as client:
        response = await HttpTransport(httpx_client=client).send("GET", f"{URL}/foobar/title")

    assert response.status == 404
    assert not response.ok
    assert response.body["value"]["error"] == "invalid session id"


@pytest.mark.anyio
async def test_plain_text_and_empty_bodies():
    responses = iter([httpx.Response(500, text="Internal Server Error"), httpx.Response(200)])

    async with make_client(lambda request: next(responses)) as client:
        transport = HttpTransport(httpx_client=client)
        text = await transport.send("GET", URL)
        empty = await transport.send("DELETE", f"{URL}/foobar")

    assert text.body == {"value": "Internal Server Error"}
    assert empty.body == {}


@pytest.mark.anyio
async def test_connection_errors_are_retried():
    attempts = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal attempts
        attempts += 1
        if attempts < 3:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json={"value": None})

    async with make_client(handler) as client:
        transport = HttpTransport(httpx_client=client, retry_count=3, initial_retry_delay=0)
        response = await transport.send("GET", URL)

    assert response.ok
    assert attempts == 3


@pytest.mark.anyio
async def test_exhausted_retries_raise_transport_error():
    attempts = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal attempts
        attempts += 1
        raise httpx.ConnectTimeout("timed out", request=request)

    async with make_client(handler) as client:
        transport = HttpTransport(httpx_client=client, retry_count=2, initial_retry_delay=0)
        with pytest.raises(TransportError, match="after 3 attempt") as exc_info:
            await transport.send("POST", URL, {})

    assert attempts == 3
    assert exc_info.value.method == "POST"
    assert exc_info.value.url == URL
    assert isinstance(exc_info.value.__cause__, httpx.ConnectTimeout)


def test_negative_retry_count_is_rejected():
    with pytest.raises(ValueError):
        HttpTransport(retry_count=-1)


@pytest.mark.anyio
async def test_external_client_is_not_closed():
    client = make_client(lambda request: httpx.Response(200, json={}))
    transport = HttpTransport(httpx_client=client)

    await transport.aclose()

    assert not client.is_closed
    await client.aclose()


@pytest.mark.anyio
async def test_own_client_is_closed():
    transport = HttpTransport(user="sauce-user", key="access-key", headers={"X-Trace": "1"})
    client = transport._client

    assert isinstance(client.auth, httpx.BasicAuth)
    assert client.headers["x-trace"] == "1"

    await transport.aclose()

    assert client.is_closed


def test_http_transport_satisfies_protocol():
    assert isinstance(HttpTransport(), Transport)
