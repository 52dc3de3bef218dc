"""General operations: TLD pricing and ping."""

from __future__ import annotations

from porkers.adapters.porkbun._request import exchange
from porkers.core.config import AppSettings
from porkers.core.domain.envelope import decode_envelope
from porkers.core.domain.general import PingResult, TLDPricingTable
from porkers.core.domain.models import Credentials
from porkers.core.interfaces.transport import RegistrarTransport


async def tld_pricing(
    *,
    settings: AppSettings | None = None,
    transport: RegistrarTransport | None = None,
) -> TLDPricingTable:
    """Default pricing of every supported TLD. Needs no authentication."""

    payload = await exchange("GET", ("pricing", "get"), settings=settings, transport=transport)
    return TLDPricingTable.decode(payload)


async def ping(
    creds: Credentials,
    *,
    settings: AppSettings | None = None,
    transport: RegistrarTransport | None = None,
) -> PingResult:
    """Check the credentials and report the caller's public IP."""

    payload = await exchange("POST", ("ping",), creds.to_wire(), settings=settings, transport=transport)
    return decode_envelope(PingResult, payload)
