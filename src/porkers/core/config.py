"""Configuration of the core.

- `AppSettings`: environment driven settings (pydantic-settings) shared by
  the transport and the CLI.
- `load_credentials`: reads the API key pair from a TOML or JSON file.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from porkers.core.domain.models import Credentials
from porkers.core.errors import ConfigError

DEFAULT_API_BASE_URL = "https://api.porkbun.com/api/json/v3"


class AppSettings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PORKERS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        min_length=8,
        description="Base URL of the Porkbun JSON API.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="porkers/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level when the CLI runs without --verbose.",
    )

    def endpoint(self, *parts: str) -> str:
        """Join path segments onto the API base URL."""

        return "/".join([self.api_base_url.rstrip("/"), *(part.strip("/") for part in parts)])


def load_settings(**overrides: Any) -> AppSettings:
    """Build `AppSettings`, reporting bad `PORKERS_*` values as `ConfigError`."""

    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        names = ", ".join(f"PORKERS_{field.upper()}" for field in fields) or "settings"
        raise ConfigError(f"invalid configuration: {names}") from None


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in (".toml", ".json"):
        raise ConfigError(f"unsupported credentials file type {suffix or '<none>'!r}: {path}")
    text = path.read_text(encoding="utf-8")
    if suffix == ".toml":
        return tomllib.loads(text)
    return json.loads(text)


def load_credentials(path: Path) -> Credentials:
    """Load `Credentials` from a TOML or JSON file.

    Accepted keys: `apikey`/`secretapikey` (wire spelling) or
    `api_key`/`secret_api_key`.
    """

    try:
        document = _read_document(path)
    except OSError as exc:
        raise ConfigError(f"cannot read credentials file {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"cannot parse credentials file {path}: not valid UTF-8") from exc
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"cannot parse credentials file {path}: {exc}") from exc

    try:
        return Credentials.model_validate(document)
    except ValidationError as exc:
        missing = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        detail = f"invalid fields {', '.join(missing)}" if missing else "expected a table of keys"
        raise ConfigError(f"invalid credentials file {path}: {detail}") from None
