"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and logging for every Porkbun call.
- Implements `RegistrarTransport`, so tests can swap in a fake transport.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from porkers.core.config import AppSettings
from porkers.core.errors import TransportError
from porkers.core.interfaces.transport import HttpMethod

log = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the configured timeout and headers."""

    settings = settings or AppSettings()
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """`RegistrarTransport` backed by a fresh `httpx.AsyncClient` per request.

    Non-2xx answers are not raised: Porkbun reports failures in a JSON body
    with `"status": "ERROR"`, which the envelopes decode.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def send(
        self,
        method: HttpMethod,
        url: str,
        json_body: dict[str, Any] | None = None,
    ) -> bytes:
        log.debug("%s %s", method, url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.request(method, url, json=json_body)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        log.debug("%s %s -> HTTP %s (%d bytes)", method, url, response.status_code, len(response.content))
        return response.content
