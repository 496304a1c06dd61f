"""Exception hierarchy for the telegrambot client.

Every error raised by the client derives from :class:`TelegramBotException`
so callers can catch the whole family with a single ``except`` clause.
Chat migration is *not* an error at the dispatcher level (it is returned as
:class:`telegrambot.client.NeedsMigration`); :class:`ChatMigratedException`
only surfaces from the endpoint wrappers when the migration cannot be applied.
"""

from typing import Any, Dict, Optional


class TelegramBotException(Exception):
    """Base class for every error raised by the telegrambot package."""


class TransportException(TelegramBotException):
    """The HTTP transport failed before a response body was obtained.

    Attributes:
        method: Bot API method that was being called, when known.
    """

    def __init__(self, message: str, method: Optional[str] = None) -> None:
        self.method = method
        super().__init__(message)


class DecodeException(TelegramBotException):
    """A response, result or webhook body could not be parsed."""


class EncodeException(TelegramBotException):
    """Request parameters could not be serialised."""


class RequestCancelledException(TelegramBotException):
    """A rate-limit wait was interrupted by a cancellation event."""


class APIException(TelegramBotException):
    """The Bot API answered ``ok: false`` with no actionable parameters.

    Attributes:
        error_code: Error code from the response envelope (usually the HTTP status).
        description: Human-readable description from the provider.
        parameters: Raw ``parameters`` object of the envelope, when present.
        method: Bot API method that failed.
    """

    def __init__(
        self,
        error_code: Optional[int],
        description: Optional[str] = None,
        parameters: Optional[Dict[str, Any]] = None,
        method: Optional[str] = None,
    ) -> None:
        """Initialise with the provider error code and optional details."""
        self.error_code = error_code
        self.description = description or "Unknown error"
        self.parameters = parameters or {}
        self.method = method
        prefix = f"{method}: " if method else ""
        super().__init__(f"{prefix}API error {error_code}: {self.description}")


class RateLimitException(APIException):
    """The provider kept answering ``retry_after`` past the configured retry cap.

    Attributes:
        retry_after: Last back-off (seconds) requested by the provider.
        attempts: Number of requests sent before giving up.
    """

    def __init__(
        self,
        retry_after: int,
        attempts: int,
        error_code: Optional[int] = 429,
        description: Optional[str] = None,
        method: Optional[str] = None,
    ) -> None:
        self.retry_after = retry_after
        self.attempts = attempts
        super().__init__(
            error_code,
            description or f"Too Many Requests: retry after {retry_after}",
            {"retry_after": retry_after},
            method,
        )


class ChatMigratedException(APIException):
    """The target group was upgraded to a supergroup and the call could not follow it.

    Attributes:
        new_chat_id: Identifier of the supergroup the chat migrated to.
    """

    def __init__(self, new_chat_id: int, method: Optional[str] = None) -> None:
        self.new_chat_id = new_chat_id
        super().__init__(
            400,
            f"Bad Request: group chat was upgraded to a supergroup chat {new_chat_id}",
            {"migrate_to_chat_id": new_chat_id},
            method,
        )
