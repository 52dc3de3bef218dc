"""Domain models of the Porkbun API.

Strict, immutable values built from the registrar's loosely typed JSON.
Nothing here knows about HTTP or the CLI.
"""

from porkers.core.domain.collections import NonEmptyList
from porkers.core.domain.envelope import decode_envelope
from porkers.core.domain.general import PingResult, TLDPricing, TLDPricingTable, parse_price
from porkers.core.domain.glue import AddressGroup, GlueHostsResponse
from porkers.core.domain.models import Credentials, Status, StatusResponse
from porkers.core.domain.ssl import SslBundle

__all__ = [
    "AddressGroup",
    "Credentials",
    "GlueHostsResponse",
    "NonEmptyList",
    "PingResult",
    "SslBundle",
    "Status",
    "StatusResponse",
    "TLDPricing",
    "TLDPricingTable",
    "decode_envelope",
    "parse_price",
]
