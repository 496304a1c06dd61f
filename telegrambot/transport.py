"""Pluggable HTTP transport.

A transport is any callable ``(method, url, headers, body) -> bytes``.  It
returns the raw response body whatever the HTTP status (the Bot API reports
errors inside the JSON envelope) and raises
:class:`~telegrambot.exceptions.TransportException` when no body could be
obtained.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

import requests

from telegrambot.exceptions import TransportException

logger = logging.getLogger(__name__)

HttpDoRequest = Callable[[str, str, Dict[str, str], bytes], bytes]

DEFAULT_TIMEOUT = 60


class RequestsTransport:
    """Default transport backed by a :class:`requests.Session`.

    Args:
        timeout: Per-request timeout in seconds.  Must exceed the long-poll
            ``timeout`` used with getUpdates.
        session: Optional pre-configured session (proxies, adapters, ...).
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: Optional[requests.Session] = None) -> None:
        self._timeout = timeout
        self._session = session or requests.Session()

    def __call__(self, method: str, url: str, headers: Dict[str, str], body: bytes) -> bytes:
        try:
            resp = self._session.request(method, url, headers=headers, data=body, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.error("HTTP request failed", extra={"error": str(exc)})
            raise TransportException(f"HTTP {method} failed: {exc}") from exc
        if not resp.ok:
            logger.debug("Non-2xx HTTP status", extra={"status_code": resp.status_code})
        return resp.content

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()
