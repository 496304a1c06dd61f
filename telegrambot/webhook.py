"""Helpers for receiving updates through a webhook."""

from __future__ import annotations

import hmac
import logging
from typing import Mapping, Optional

from pydantic import ValidationError

from telegrambot.exceptions import DecodeException
from telegrambot.models import Update

logger = logging.getLogger(__name__)

SECRET_TOKEN_HEADER = "X-Telegram-Bot-Api-Secret-Token"


def parse_webhook_update(body: bytes | str) -> Update:
    """Decode the body of one webhook request into an :class:`Update`.

    Raises:
        DecodeException: The body is not a valid Update.
    """
    try:
        return Update.model_validate_json(body)
    except ValidationError as exc:
        logger.error("Malformed webhook update", extra={"error": str(exc)})
        raise DecodeException(f"malformed webhook update: {exc}") from exc


def verify_secret_token(headers: Mapping[str, str], expected: Optional[str]) -> bool:
    """Check the secret token header set through ``SetWebhookParams.secret_token``.

    Header lookup is case-insensitive.  With no *expected* token every request
    is accepted.
    """
    if not expected:
        return True
    received = None
    for key, value in headers.items():
        if key.lower() == SECRET_TOKEN_HEADER.lower():
            received = value
            break
    if received is None:
        return False
    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))
