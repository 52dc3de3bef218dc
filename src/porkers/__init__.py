"""porkers: typed async client for the Porkbun domain registrar API."""

from porkers.core.domain import (
    AddressGroup,
    Credentials,
    GlueHostsResponse,
    NonEmptyList,
    PingResult,
    SslBundle,
    Status,
    StatusResponse,
    TLDPricing,
    TLDPricingTable,
    parse_price,
)
from porkers.core.errors import (
    ConfigError,
    ConstructionError,
    DecodeError,
    EmptyInputError,
    PorkbunError,
    PriceParseError,
    TransportError,
    UnknownStatusError,
)

__version__ = "0.1.0"

__all__ = [
    "AddressGroup",
    "ConfigError",
    "ConstructionError",
    "Credentials",
    "DecodeError",
    "EmptyInputError",
    "GlueHostsResponse",
    "NonEmptyList",
    "PingResult",
    "PorkbunError",
    "PriceParseError",
    "SslBundle",
    "Status",
    "StatusResponse",
    "TLDPricing",
    "TLDPricingTable",
    "TransportError",
    "UnknownStatusError",
    "parse_price",
]
