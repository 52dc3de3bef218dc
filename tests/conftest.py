"""Shared pytest fixtures for porkers tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from typing import Any

import pytest

from porkers.core.config import AppSettings
from porkers.core.domain.models import Credentials

API_KEY = "pk1_public_value_0123"
SECRET_API_KEY = "sk1_secret_value_4567"


class FakeTransport:
    """`RegistrarTransport` that records requests and replays a canned body."""

    def __init__(self, payload: Any = None, *, raw: bytes | None = None) -> None:
        self._raw = raw if raw is not None else json.dumps(payload).encode()
        self.calls: list[tuple[str, str, dict[str, Any] | None]] = []

    async def send(self, method: str, url: str, json_body: dict[str, Any] | None = None) -> bytes:
        self.calls.append((method, url, json_body))
        return self._raw


@pytest.fixture
def creds() -> Credentials:
    return Credentials(apikey=API_KEY, secretapikey=SECRET_API_KEY)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(api_base_url="https://api.test/v3", http_timeout_seconds=5)


@pytest.fixture
def fake_transport():
    """Factory: `fake_transport(payload)` or `fake_transport(raw=b"...")`."""

    return FakeTransport


@pytest.fixture(autouse=True)
def _restore_porkers_logger() -> Generator[None, None, None]:
    """Undo `configure_logging` so handlers never outlive a test's stderr."""

    logger = logging.getLogger("porkers")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
