"""SSL operations."""

from __future__ import annotations

from porkers.adapters.porkbun._request import exchange
from porkers.core.config import AppSettings
from porkers.core.domain.envelope import decode_envelope
from porkers.core.domain.models import Credentials
from porkers.core.domain.ssl import SslBundle
from porkers.core.interfaces.transport import RegistrarTransport


async def retrieve_bundle(
    creds: Credentials,
    domain: str,
    *,
    settings: AppSettings | None = None,
    transport: RegistrarTransport | None = None,
) -> SslBundle:
    """Retrieve the SSL certificate bundle of `domain`."""

    payload = await exchange(
        "POST",
        ("ssl", "retrieve", domain),
        creds.to_wire(),
        settings=settings,
        transport=transport,
    )
    return decode_envelope(SslBundle, payload)
