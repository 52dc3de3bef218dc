"""SSL bundle model."""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr
from pydantic.config import ConfigDict

from porkers.core.domain.models import REDACTED, WireStatus


class SslBundle(BaseModel):
    """Certificate bundle of a domain.

    The certificate chain and the private key are never rendered; the public
    key is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    certificate_chain: SecretStr = Field(..., alias="certificatechain")
    private_key: SecretStr = Field(..., alias="privatekey")
    public_key: str = Field(..., alias="publickey")
    status: WireStatus

    def __str__(self) -> str:
        return (
            f"Status: {self.status}\n"
            f"Certificate chain: {REDACTED}\n"
            f"Private key: {REDACTED}\n"
            f"Public key: {self.public_key}"
        )

    def __repr__(self) -> str:
        return f"SslBundle(status={self.status!s}, public_key={self.public_key!r})"
