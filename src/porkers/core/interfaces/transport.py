"""HTTP transport contract.

Why a Protocol:
- The operations only need "send one request, get the raw body back".
- Tests substitute a recording fake without touching httpx.
"""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable

HttpMethod = Literal["GET", "POST"]


@runtime_checkable
class RegistrarTransport(Protocol):
    """Minimal contract for talking to the registrar.

    Rules:
    - `send` is asynchronous; one call is one request/response exchange.
    - Failures of the exchange raise `porkers.core.errors.TransportError`.
    """

    async def send(
        self,
        method: HttpMethod,
        url: str,
        json_body: dict[str, Any] | None = None,
    ) -> bytes:
        """Send `json_body` (if any) to `url` and return the raw response body."""

        ...
