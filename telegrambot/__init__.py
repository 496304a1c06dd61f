"""Typed Telegram Bot API client.

Derived from the Bot API reference.  :class:`API` wraps every endpoint with a
synchronous method taking a params model; :class:`UpdatePoller` and
:func:`parse_webhook_update` cover the two ways of receiving updates.

Usage::

    from telegrambot import API, start_receiving_updates
    from telegrambot.params import SendMessageParams

    api = API.from_env()
    api.send_message(SendMessageParams(chat_id=42, text="hello"))
"""

from telegrambot.client import (
    API,
    DEFAULT_API_ENDPOINT_URL,
    NeedsMigration,
    Success,
    new_api,
)
from telegrambot.exceptions import (
    APIException,
    ChatMigratedException,
    DecodeException,
    EncodeException,
    RateLimitException,
    RequestCancelledException,
    TelegramBotException,
    TransportException,
)
from telegrambot.files import FileID, FileReader, FileURL, InputFile
from telegrambot.polling import UpdatePoller, sort_updates, start_receiving_updates
from telegrambot.transport import RequestsTransport
from telegrambot.webhook import parse_webhook_update

__all__ = [
    "API",
    "DEFAULT_API_ENDPOINT_URL",
    "NeedsMigration",
    "Success",
    "new_api",
    "APIException",
    "ChatMigratedException",
    "DecodeException",
    "EncodeException",
    "RateLimitException",
    "RequestCancelledException",
    "TelegramBotException",
    "TransportException",
    "FileID",
    "FileReader",
    "FileURL",
    "InputFile",
    "UpdatePoller",
    "sort_updates",
    "start_receiving_updates",
    "RequestsTransport",
    "parse_webhook_update",
]
