"""Single round trip shared by every Porkbun operation."""

from __future__ import annotations

import json
from typing import Any

from porkers.adapters.http_client import HttpxTransport
from porkers.core.config import AppSettings
from porkers.core.errors import TransportError
from porkers.core.interfaces.transport import HttpMethod, RegistrarTransport


async def exchange(
    method: HttpMethod,
    path: tuple[str, ...],
    body: dict[str, Any] | None = None,
    *,
    settings: AppSettings | None = None,
    transport: RegistrarTransport | None = None,
) -> Any:
    """Send one request and return the decoded JSON document.

    A body that is not JSON is a transport failure, not a decode failure:
    the exchange itself produced nothing usable.
    """

    settings = settings or AppSettings()
    transport = transport or HttpxTransport(settings)
    url = settings.endpoint(*path)
    raw = await transport.send(method, url, body)
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise TransportError(f"{method} {url} returned a non-JSON body") from exc
