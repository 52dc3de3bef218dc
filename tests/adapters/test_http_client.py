"""Tests for the httpx-backed transport."""

import asyncio
import json

import httpx
import pytest

from porkers.adapters.http_client import HttpxTransport, build_async_client
from porkers.core.config import AppSettings
from porkers.core.errors import TransportError
from porkers.core.interfaces.transport import RegistrarTransport


def test_implements_protocol() -> None:
    assert isinstance(HttpxTransport(AppSettings()), RegistrarTransport)


def test_client_headers_and_timeout() -> None:
    settings = AppSettings(user_agent="porkers-test/1", http_timeout_seconds=3)

    async def scenario() -> httpx.AsyncClient:
        async with build_async_client(settings) as client:
            return client

    client = asyncio.run(scenario())
    assert client.headers["User-Agent"] == "porkers-test/1"
    assert client.headers["Accept"] == "application/json"
    assert client.timeout.read == 3


def test_post_sends_json_body(settings: AppSettings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "SUCCESS"})

    transport = HttpxTransport(settings, transport=httpx.MockTransport(handler))
    body = asyncio.run(transport.send("POST", "https://api.test/v3/ping", {"apikey": "a"}))

    assert json.loads(body) == {"status": "SUCCESS"}
    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {"apikey": "a"}


def test_get_sends_no_body(settings: AppSettings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"pricing": {}, "status": "SUCCESS"})

    transport = HttpxTransport(settings, transport=httpx.MockTransport(handler))
    asyncio.run(transport.send("GET", "https://api.test/v3/pricing/get"))
    assert seen[0].method == "GET"
    assert seen[0].content == b""


def test_error_status_body_is_returned(settings: AppSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"status": "ERROR", "message": "Invalid API key."})

    transport = HttpxTransport(settings, transport=httpx.MockTransport(handler))
    body = asyncio.run(transport.send("POST", "https://api.test/v3/ping", {}))
    assert json.loads(body)["status"] == "ERROR"


def test_connection_error_wrapped(settings: AppSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = HttpxTransport(settings, transport=httpx.MockTransport(handler))
    with pytest.raises(TransportError) as excinfo:
        asyncio.run(transport.send("POST", "https://api.test/v3/ping", {}))
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
