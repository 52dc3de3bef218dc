"""Shared domain models (Pydantic v2).

What lives here:
- `Credentials`: the API key pair merged into every authenticated body.
- `Status`: the ERROR/SUCCESS tag carried by every response envelope.
- `StatusResponse`: the bare envelope returned by mutating operations.

Redaction is structural: secret fields are `SecretStr` and `__str__` is
hard-coded, so no rendering path reads the plaintext.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field, SecretStr
from pydantic.config import ConfigDict

from porkers.core.errors import UnknownStatusError

REDACTED = "<REDACTED>"


class Status(str, Enum):
    """Outcome tag returned by Porkbun."""

    ERROR = "ERROR"
    SUCCESS = "SUCCESS"

    @classmethod
    def parse(cls, token: Any) -> "Status":
        """Decode a wire token, case-insensitively.

        Raises:
            UnknownStatusError: for anything other than ERROR/SUCCESS.
        """

        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise UnknownStatusError(token)
        try:
            return cls(token.upper())
        except ValueError:
            raise UnknownStatusError(token) from None

    def __str__(self) -> str:
        return self.value


WireStatus = Annotated[Status, BeforeValidator(Status.parse)]


class Credentials(BaseModel):
    """Porkbun API key pair.

    Immutable. Wire names are `apikey` / `secretapikey`; the Python field
    names are accepted too so config files may use either spelling.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: SecretStr = Field(
        ...,
        validation_alias=AliasChoices("apikey", "api_key"),
        serialization_alias="apikey",
        description="Public API key (pk1_...).",
    )
    secret_api_key: SecretStr = Field(
        ...,
        validation_alias=AliasChoices("secretapikey", "secret_api_key"),
        serialization_alias="secretapikey",
        description="Secret API key (sk1_...).",
    )

    def to_wire(self) -> dict[str, str]:
        """Plaintext body fields for an authenticated request."""

        return {
            "apikey": self.api_key.get_secret_value(),
            "secretapikey": self.secret_api_key.get_secret_value(),
        }

    def __str__(self) -> str:
        return f"api_key: {REDACTED}\nsecret_api_key: {REDACTED}"

    def __repr__(self) -> str:
        return f"Credentials(api_key={REDACTED!r}, secret_api_key={REDACTED!r})"


class StatusResponse(BaseModel):
    """Envelope of operations that only report an outcome."""

    model_config = ConfigDict(frozen=True)

    status: WireStatus
    message: str | None = Field(
        default=None,
        description="Human readable detail Porkbun sends alongside errors.",
    )

    def __str__(self) -> str:
        if self.message:
            return f"{self.status}: {self.message}"
        return str(self.status)
