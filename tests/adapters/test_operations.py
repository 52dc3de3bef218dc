"""Tests for the Porkbun operation functions (one round trip each)."""

import asyncio
from ipaddress import ip_address

import pytest

from porkers.adapters.porkbun import general, glue, ssl
from porkers.core.config import AppSettings
from porkers.core.domain.collections import NonEmptyList
from porkers.core.domain.models import Credentials, Status
from porkers.core.errors import DecodeError, EmptyInputError, TransportError

BASE = "https://api.test/v3"


class TestGlueOperations:
    def test_create(self, creds: Credentials, settings: AppSettings, fake_transport) -> None:
        transport = fake_transport({"status": "SUCCESS"})
        ips = NonEmptyList.of(ip_address("1.2.3.4"), ip_address("2001:db8::1"))

        response = asyncio.run(
            glue.create(creds, "example.com", "ns1", ips, settings=settings, transport=transport)
        )

        assert response.status is Status.SUCCESS
        assert transport.calls == [
            (
                "POST",
                f"{BASE}/domain/createGlue/example.com/ns1",
                {**creds.to_wire(), "ips": ["1.2.3.4", "2001:db8::1"]},
            )
        ]

    def test_create_empty_ips_sends_nothing(self, creds: Credentials, settings: AppSettings, fake_transport) -> None:
        transport = fake_transport({"status": "SUCCESS"})
        with pytest.raises(EmptyInputError):
            asyncio.run(glue.create(creds, "example.com", "ns1", [], settings=settings, transport=transport))
        assert transport.calls == []

    def test_update(self, creds: Credentials, settings: AppSettings, fake_transport) -> None:
        transport = fake_transport({"status": "SUCCESS"})
        asyncio.run(
            glue.update(creds, "example.com", "ns1", [ip_address("5.6.7.8")], settings=settings, transport=transport)
        )
        method, url, body = transport.calls[0]
        assert (method, url) == ("POST", f"{BASE}/domain/updateGlue/example.com/ns1")
        assert body["ips"] == ["5.6.7.8"]

    def test_update_empty_ips_sends_nothing(self, creds: Credentials, settings: AppSettings, fake_transport) -> None:
        transport = fake_transport({"status": "SUCCESS"})
        with pytest.raises(EmptyInputError):
            asyncio.run(glue.update(creds, "example.com", "ns1", (), settings=settings, transport=transport))
        assert transport.calls == []

    def test_delete(self, creds: Credentials, settings: AppSettings, fake_transport) -> None:
        transport = fake_transport({"status": "ERROR", "message": "Glue record not found."})
        response = asyncio.run(glue.delete(creds, "example.com", "ns9", settings=settings, transport=transport))
        assert response.status is Status.ERROR
        assert response.message == "Glue record not found."
        assert transport.calls == [("POST", f"{BASE}/domain/deleteGlue/example.com/ns9", creds.to_wire())]

    def test_get(self, creds: Credentials, settings: AppSettings, fake_transport) -> None:
        transport = fake_transport(
            {"hosts": [["ns1.example.com", {"v4": ["1.2.3.4"], "v6": None}]], "status": "SUCCESS"}
        )
        response = asyncio.run(glue.get(creds, "example.com", settings=settings, transport=transport))
        assert str(response) == "ns1.example.com:\n  1.2.3.4"
        assert transport.calls == [("POST", f"{BASE}/domain/getGlue/example.com", creds.to_wire())]

    def test_get_error_body_is_decode_error(self, creds: Credentials, settings: AppSettings, fake_transport) -> None:
        transport = fake_transport({"status": "ERROR", "message": "Invalid domain."})
        with pytest.raises(DecodeError):
            asyncio.run(glue.get(creds, "example.com", settings=settings, transport=transport))


class TestGeneralOperations:
    def test_tld_pricing_unauthenticated_get(self, settings: AppSettings, fake_transport) -> None:
        transport = fake_transport(
            {
                "pricing": {"com": {"registration": "10.00", "renewal": "12.00", "transfer": "10.00"}},
                "status": "SUCCESS",
            }
        )
        table = asyncio.run(general.tld_pricing(settings=settings, transport=transport))
        assert table["com"].renewal == 12.0
        assert transport.calls == [("GET", f"{BASE}/pricing/get", None)]

    def test_ping(self, creds: Credentials, settings: AppSettings, fake_transport) -> None:
        transport = fake_transport({"status": "SUCCESS", "yourIp": "198.51.100.4"})
        result = asyncio.run(general.ping(creds, settings=settings, transport=transport))
        assert str(result.your_ip) == "198.51.100.4"
        assert transport.calls == [("POST", f"{BASE}/ping", creds.to_wire())]


class TestSslOperations:
    def test_retrieve_bundle(self, creds: Credentials, settings: AppSettings, fake_transport) -> None:
        transport = fake_transport(
            {"status": "SUCCESS", "certificatechain": "C", "privatekey": "P", "publickey": "K"}
        )
        bundle = asyncio.run(ssl.retrieve_bundle(creds, "example.com", settings=settings, transport=transport))
        assert bundle.public_key == "K"
        assert transport.calls == [("POST", f"{BASE}/ssl/retrieve/example.com", creds.to_wire())]


class TestFailures:
    def test_non_json_body_is_transport_error(self, creds: Credentials, settings: AppSettings, fake_transport) -> None:
        transport = fake_transport(raw=b"<html>502 Bad Gateway</html>")
        with pytest.raises(TransportError):
            asyncio.run(general.ping(creds, settings=settings, transport=transport))

    def test_transport_error_propagates(self, creds: Credentials, settings: AppSettings) -> None:
        class Failing:
            async def send(self, method, url, json_body=None):
                raise TransportError("connection refused")

        with pytest.raises(TransportError, match="connection refused"):
            asyncio.run(glue.get(creds, "example.com", settings=settings, transport=Failing()))

    def test_concurrent_calls_are_independent(self, creds: Credentials, settings: AppSettings, fake_transport) -> None:
        first = fake_transport({"status": "SUCCESS", "yourIp": "192.0.2.1"})
        second = fake_transport({"status": "SUCCESS", "yourIp": "192.0.2.2"})

        async def scenario():
            return await asyncio.gather(
                general.ping(creds, settings=settings, transport=first),
                general.ping(creds, settings=settings, transport=second),
            )

        one, two = asyncio.run(scenario())
        assert str(one.your_ip) == "192.0.2.1"
        assert str(two.your_ip) == "192.0.2.2"
        assert len(first.calls) == len(second.calls) == 1
