"""Response envelope parsing and typed result decoding."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError

from telegrambot.exceptions import DecodeException
from telegrambot.models import ResponseParameters

logger = logging.getLogger(__name__)


class Response(BaseModel):
    """The envelope wrapping every Bot API answer."""

    ok: bool
    error_code: Optional[int] = None
    description: Optional[str] = None
    parameters: Optional[ResponseParameters] = None
    result: Any = None

    model_config = {"populate_by_name": True}

    @property
    def migrate_to_chat_id(self) -> int:
        """Chat the target group migrated to, or ``0`` when absent."""
        if self.parameters is None:
            return 0
        return self.parameters.migrate_to_chat_id or 0

    @property
    def retry_after(self) -> int:
        """Seconds to wait before retrying, or ``0`` when absent."""
        if self.parameters is None:
            return 0
        return self.parameters.retry_after or 0


def decode_response(body: bytes | str) -> Response:
    """Parse a raw response body into a :class:`Response`.

    Raises:
        DecodeException: The body is not a valid envelope.
    """
    try:
        return Response.model_validate_json(body)
    except ValidationError as exc:
        logger.error("Malformed response envelope", extra={"error": str(exc)})
        raise DecodeException(f"malformed response envelope: {exc}") from exc


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def decode_result(result: Any, result_type: Any = None) -> Any:
    """Validate the envelope's ``result`` against *result_type*.

    With no *result_type* the raw JSON value is returned unchanged.

    Raises:
        DecodeException: The result does not match *result_type*.
    """
    if result_type is None:
        return result
    try:
        return _adapter(result_type).validate_python(result)
    except ValidationError as exc:
        raise DecodeException(f"result does not match {result_type!r}: {exc}") from exc
