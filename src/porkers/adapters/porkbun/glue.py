"""Glue record operations (createGlue, updateGlue, deleteGlue, getGlue)."""

from __future__ import annotations

from collections.abc import Iterable

from porkers.adapters.porkbun._request import exchange
from porkers.core.config import AppSettings
from porkers.core.domain.envelope import decode_envelope
from porkers.core.domain.glue import GlueHostsResponse, IPAddress, glue_body
from porkers.core.domain.models import Credentials, StatusResponse
from porkers.core.interfaces.transport import RegistrarTransport

DOMAIN_PATH = "domain"


async def create(
    creds: Credentials,
    domain: str,
    glue_host_subdomain: str,
    ips: Iterable[IPAddress | str],
    *,
    settings: AppSettings | None = None,
    transport: RegistrarTransport | None = None,
) -> StatusResponse:
    """Create a glue record for `glue_host_subdomain.domain`.

    Raises `EmptyInputError` before any request when `ips` is empty.
    """

    body = glue_body(creds, ips)
    payload = await exchange(
        "POST",
        (DOMAIN_PATH, "createGlue", domain, glue_host_subdomain),
        body,
        settings=settings,
        transport=transport,
    )
    return decode_envelope(StatusResponse, payload)


async def update(
    creds: Credentials,
    domain: str,
    glue_host_subdomain: str,
    ips: Iterable[IPAddress | str],
    *,
    settings: AppSettings | None = None,
    transport: RegistrarTransport | None = None,
) -> StatusResponse:
    """Replace the addresses of an existing glue record."""

    body = glue_body(creds, ips)
    payload = await exchange(
        "POST",
        (DOMAIN_PATH, "updateGlue", domain, glue_host_subdomain),
        body,
        settings=settings,
        transport=transport,
    )
    return decode_envelope(StatusResponse, payload)


async def delete(
    creds: Credentials,
    domain: str,
    glue_host_subdomain: str,
    *,
    settings: AppSettings | None = None,
    transport: RegistrarTransport | None = None,
) -> StatusResponse:
    payload = await exchange(
        "POST",
        (DOMAIN_PATH, "deleteGlue", domain, glue_host_subdomain),
        creds.to_wire(),
        settings=settings,
        transport=transport,
    )
    return decode_envelope(StatusResponse, payload)


async def get(
    creds: Credentials,
    domain: str,
    *,
    settings: AppSettings | None = None,
    transport: RegistrarTransport | None = None,
) -> GlueHostsResponse:
    """All glue records of `domain`."""

    payload = await exchange(
        "POST",
        (DOMAIN_PATH, "getGlue", domain),
        creds.to_wire(),
        settings=settings,
        transport=transport,
    )
    return decode_envelope(GlueHostsResponse, payload)
