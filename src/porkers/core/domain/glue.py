"""Glue record models.

`getGlue` answers with::

    {"status": "SUCCESS",
     "hosts": [["ns1.example.com", {"v4": ["1.2.3.4"], "v6": null}], ...]}

The status and the host list are siblings on the wire and fields of one flat
`GlueHostsResponse` here.
"""

from __future__ import annotations

from collections.abc import Iterable
from ipaddress import IPv4Address, IPv6Address, ip_address

from pydantic import BaseModel
from pydantic.config import ConfigDict

from porkers.core.domain.collections import NonEmptyList
from porkers.core.domain.models import Credentials, WireStatus

IPAddress = IPv4Address | IPv6Address


def _join(addresses: Iterable[object]) -> str:
    return ", ".join(str(address) for address in addresses)


class AddressGroup(BaseModel):
    """Addresses attached to one glue host, per family."""

    model_config = ConfigDict(frozen=True)

    v4: NonEmptyList[IPv4Address] | None = None
    v6: NonEmptyList[IPv6Address] | None = None

    def __str__(self) -> str:
        return "\n".join(_join(group) for group in (self.v4, self.v6) if group is not None)


class GlueHostsResponse(BaseModel):
    """Every glue host of a domain, in the order Porkbun lists them."""

    model_config = ConfigDict(frozen=True)

    hosts: tuple[tuple[str, AddressGroup], ...]
    status: WireStatus

    def __str__(self) -> str:
        blocks = []
        for host, group in self.hosts:
            if group.v4 is None and group.v6 is None:
                blocks.append(f"{host}: n/a")
                continue
            lines = [f"{host}:"]
            lines.extend(f"  {line}" for line in str(group).split("\n"))
            blocks.append("\n".join(lines))
        return "\n".join(blocks)


def _as_address(item: object) -> IPAddress:
    if isinstance(item, (IPv4Address, IPv6Address)):
        return item
    if isinstance(item, str):
        return ip_address(item)
    raise TypeError(f"expected an IP address, got {type(item).__name__}")


def glue_body(creds: Credentials, ips: Iterable[IPAddress | str]) -> dict[str, object]:
    """Request body for createGlue/updateGlue.

    Items may be `ipaddress` objects or address strings.

    Raises:
        TypeError: when `ips` is a single string or holds non-address items.
        ValueError: when a string is not a valid IPv4/IPv6 address.
        EmptyInputError: when `ips` is empty; nothing is sent in that case.
    """

    if isinstance(ips, (str, bytes)):
        raise TypeError("ips must be a collection of addresses, not a single string")
    addresses = NonEmptyList(_as_address(ip) for ip in ips)
    return {**creds.to_wire(), "ips": [str(ip) for ip in addresses]}
