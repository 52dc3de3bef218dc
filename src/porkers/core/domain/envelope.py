"""One-step decoding of response envelopes."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from porkers.core.errors import DecodeError, PorkbunError

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_envelope(model: type[ModelT], payload: Any) -> ModelT:
    """Validate `payload` into `model`, all or nothing.

    Domain errors raised by field validators (empty address list, unknown
    status, bad price) are re-raised as themselves; any other mismatch
    becomes a `DecodeError` naming the envelope.
    """

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        for error in exc.errors():
            cause = (error.get("ctx") or {}).get("error")
            if isinstance(cause, PorkbunError):
                raise cause from exc
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise DecodeError(model.__name__, f"{location}: {first['msg']}") from exc
