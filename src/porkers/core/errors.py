"""Error taxonomy of the porkers core.

Every error raised by the library derives from `PorkbunError`, so callers can
catch the whole family at one boundary (the CLI does exactly that). Value
errors (empty input, bad prices, unknown statuses) also derive from
`ValueError` so pydantic reports them as validation failures while decoding.
"""

from __future__ import annotations


class PorkbunError(Exception):
    """Base exception for every porkers failure."""


class ConstructionError(PorkbunError, ValueError):
    """A value with a mandatory invariant could not be built."""


class EmptyInputError(ConstructionError):
    """A non-empty collection was built from zero elements."""

    def __init__(self, what: str = "collection") -> None:
        super().__init__(f"{what} requires at least one element")
        self.what = what


class PriceParseError(PorkbunError, ValueError):
    """A price string is not a valid decimal literal."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"invalid price: {raw!r}")
        self.raw = raw


class UnknownStatusError(PorkbunError, ValueError):
    """The remote status token is neither ERROR nor SUCCESS."""

    def __init__(self, token: object) -> None:
        super().__init__(f"unknown status: {token!r}")
        self.token = token


class TransportError(PorkbunError):
    """The HTTP exchange failed or returned an unreadable body."""


class DecodeError(PorkbunError):
    """A response body does not match the shape of its envelope."""

    def __init__(self, envelope: str, detail: str) -> None:
        super().__init__(f"could not decode {envelope}: {detail}")
        self.envelope = envelope
        self.detail = detail


class ConfigError(PorkbunError):
    """Configuration (credentials file) is missing or invalid."""
