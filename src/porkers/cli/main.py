"""porkers command line interface.

Thin layer: parses flags, loads credentials, runs one operation and prints
its rendering. Any library error aborts with exit code 1 and nothing on
stdout.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from ipaddress import ip_address
from pathlib import Path
from typing import TypeVar

import typer
from rich.console import Console

from porkers.adapters.porkbun import general, glue, ssl
from porkers.cli.ui_components import print_error, print_result
from porkers.core.config import AppSettings, load_credentials, load_settings
from porkers.core.domain.collections import NonEmptyList
from porkers.core.domain.glue import IPAddress
from porkers.core.domain.models import Credentials
from porkers.core.errors import PorkbunError
from porkers.core.logging_conf import configure_logging

ResultT = TypeVar("ResultT")

app = typer.Typer(no_args_is_help=True, help="Client for the Porkbun domain registrar API.")
general_app = typer.Typer(no_args_is_help=True, help="Misc operations.")
glue_app = typer.Typer(no_args_is_help=True, help="Manage the glue records of a domain.")
ssl_app = typer.Typer(no_args_is_help=True, help="SSL certificate operations.")
app.add_typer(general_app, name="general")
app.add_typer(glue_app, name="glue")
app.add_typer(ssl_app, name="ssl")

_console = Console()
_err_console = Console(stderr=True)


@dataclass(frozen=True)
class DomainContext:
    settings: AppSettings
    credentials: Credentials
    domain: str


def _run(factory: Callable[[], Awaitable[ResultT]]) -> ResultT:
    try:
        return asyncio.run(factory())  # type: ignore[arg-type]
    except PorkbunError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc


def _load(credential_path: Path) -> Credentials:
    try:
        return load_credentials(credential_path)
    except PorkbunError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc


def _parse_ips(values: list[str]) -> list[str]:
    for value in values:
        try:
            ip_address(value)
        except ValueError:
            raise typer.BadParameter(f"{value!r} is not a valid IPv4 or IPv6 address") from None
    return values


def _to_addresses(values: list[str]) -> NonEmptyList[IPAddress]:
    # --ips is required, so the list is never empty here
    return NonEmptyList(ip_address(value) for value in values)


CredentialPathOption = typer.Option(
    ...,
    "--credential-path",
    metavar="FILE",
    help="TOML or JSON file holding apikey/secretapikey.",
)
SubdomainOption = typer.Option(..., "--subdomain", help="Glue host subdomain (e.g. ns1).")
IpsOption = typer.Option(
    ...,
    "--ips",
    callback=_parse_ips,
    help="IP address of the glue host; repeat for several.",
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr."),
) -> None:
    try:
        settings = load_settings()
    except PorkbunError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc
    configure_logging(verbose=verbose, level=settings.log_level)
    ctx.obj = settings


@general_app.command(name="tld-pricing")
def tld_pricing(ctx: typer.Context) -> None:
    """Get the pricing listing of all TLDs."""

    settings: AppSettings = ctx.obj
    result = _run(lambda: general.tld_pricing(settings=settings))
    print_result(_console, result)


@general_app.command()
def ping(ctx: typer.Context, credential_path: Path = CredentialPathOption) -> None:
    """Check the credentials and show your public IP."""

    settings: AppSettings = ctx.obj
    creds = _load(credential_path)
    result = _run(lambda: general.ping(creds, settings=settings))
    print_result(_console, result)


@glue_app.callback()
def glue_main(
    ctx: typer.Context,
    credential_path: Path = CredentialPathOption,
    domain: str = typer.Option(..., "--domain", help="Domain owning the glue records."),
) -> None:
    ctx.obj = DomainContext(settings=ctx.obj, credentials=_load(credential_path), domain=domain)


@glue_app.command()
def create(ctx: typer.Context, subdomain: str = SubdomainOption, ips: list[str] = IpsOption) -> None:
    """Create a new glue record."""

    target: DomainContext = ctx.obj
    addresses = _to_addresses(ips)
    result = _run(
        lambda: glue.create(target.credentials, target.domain, subdomain, addresses, settings=target.settings)
    )
    print_result(_console, result)


@glue_app.command()
def delete(ctx: typer.Context, subdomain: str = SubdomainOption) -> None:
    """Delete an existing glue record."""

    target: DomainContext = ctx.obj
    result = _run(lambda: glue.delete(target.credentials, target.domain, subdomain, settings=target.settings))
    print_result(_console, result)


@glue_app.command()
def get(ctx: typer.Context) -> None:
    """Get all glue records of the domain."""

    target: DomainContext = ctx.obj
    result = _run(lambda: glue.get(target.credentials, target.domain, settings=target.settings))
    print_result(_console, result)


@glue_app.command()
def update(ctx: typer.Context, subdomain: str = SubdomainOption, ips: list[str] = IpsOption) -> None:
    """Replace the IPs of an existing glue record."""

    target: DomainContext = ctx.obj
    addresses = _to_addresses(ips)
    result = _run(
        lambda: glue.update(target.credentials, target.domain, subdomain, addresses, settings=target.settings)
    )
    print_result(_console, result)


@ssl_app.callback()
def ssl_main(
    ctx: typer.Context,
    credential_path: Path = CredentialPathOption,
    domain: str = typer.Option(..., "--domain", help="Domain whose bundle to retrieve."),
) -> None:
    ctx.obj = DomainContext(settings=ctx.obj, credentials=_load(credential_path), domain=domain)


@ssl_app.command()
def retrieve(ctx: typer.Context) -> None:
    """Retrieve the SSL bundle (chain and private key are redacted)."""

    target: DomainContext = ctx.obj
    result = _run(lambda: ssl.retrieve_bundle(target.credentials, target.domain, settings=target.settings))
    print_result(_console, result)


def run() -> None:
    app()
