"""General API models: TLD pricing and ping.

Prices arrive as strings such as ``"1,234.50"``. They are first decoded into
`TLDPricingResponseWire` (strings untouched) and then converted into the
strict `TLDPricingTable` by `TLDPricingTable.from_wire`.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from ipaddress import IPv4Address, IPv6Address
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from porkers.core.domain.envelope import decode_envelope
from porkers.core.domain.models import Status, WireStatus
from porkers.core.errors import PriceParseError

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_price(raw: str) -> float:
    """Parse a price string, treating every comma as a thousands separator.

    Raises:
        PriceParseError: when what remains is not a decimal literal.
    """

    stripped = raw.replace(",", "")
    if not _DECIMAL_LITERAL.fullmatch(stripped):
        raise PriceParseError(raw)
    return float(stripped)


def format_price(amount: float) -> str:
    return f"{amount:.2f}"


class TLDPricingWire(BaseModel):
    """Fees of one TLD exactly as sent on the wire."""

    registration: str
    renewal: str
    transfer: str


class TLDPricingResponseWire(BaseModel):
    pricing: dict[str, TLDPricingWire]
    status: WireStatus


class TLDPricing(BaseModel):
    """Fees for each operation on a TLD."""

    model_config = ConfigDict(frozen=True)

    registration: float
    renewal: float
    transfer: float

    @classmethod
    def from_wire(cls, wire: TLDPricingWire) -> "TLDPricing":
        return cls(
            registration=parse_price(wire.registration),
            renewal=parse_price(wire.renewal),
            transfer=parse_price(wire.transfer),
        )


class TLDPricingTable(Mapping[str, TLDPricing]):
    """Pricing of every TLD, keyed and iterated in sorted TLD order."""

    __slots__ = ("_pricing", "_status")

    def __init__(self, pricing: Mapping[str, TLDPricing], status: Status) -> None:
        self._pricing: Mapping[str, TLDPricing] = MappingProxyType(
            dict(sorted(pricing.items()))
        )
        self._status = status

    @property
    def pricing(self) -> Mapping[str, TLDPricing]:
        return self._pricing

    @property
    def status(self) -> Status:
        return self._status

    @classmethod
    def from_wire(cls, wire: TLDPricingResponseWire) -> "TLDPricingTable":
        pricing = {tld: TLDPricing.from_wire(fees) for tld, fees in wire.pricing.items()}
        return cls(pricing, wire.status)

    @classmethod
    def decode(cls, payload: Any) -> "TLDPricingTable":
        return cls.from_wire(decode_envelope(TLDPricingResponseWire, payload))

    def __getitem__(self, tld: str) -> TLDPricing:
        return self._pricing[tld]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pricing)

    def __len__(self) -> int:
        return len(self._pricing)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TLDPricingTable):
            return self._status is other._status and dict(self._pricing) == dict(other._pricing)
        return NotImplemented

    def __repr__(self) -> str:
        return f"TLDPricingTable(status={self._status!s}, tlds={len(self._pricing)})"

    def __str__(self) -> str:
        lines = [f"Status: {self._status}"]
        for tld, fees in self._pricing.items():
            lines.append(f"{tld}:")
            lines.append(f"  Registration: {format_price(fees.registration)}")
            lines.append(f"  Renewal: {format_price(fees.renewal)}")
            lines.append(f"  Transfer: {format_price(fees.transfer)}")
        return "\n".join(lines)


class PingResult(BaseModel):
    """Answer of the authenticated ping endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: WireStatus
    your_ip: IPv4Address | IPv6Address = Field(..., alias="yourIp")

    def __str__(self) -> str:
        return f"Status: {self.status}\nYour IP: {self.your_ip}"
