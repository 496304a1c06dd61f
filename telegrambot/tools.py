"""Small helpers for common bot chores: callback data, commands and chat actions."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from telegrambot.enums import MessageEntityType
from telegrambot.exceptions import TelegramBotException
from telegrambot.models import Message
from telegrambot.params import SendChatActionParams
from telegrambot.repeater import Repeater

logger = logging.getLogger(__name__)

CALLBACK_DATA_SEPARATOR = "\x00"

# Telegram clients show a chat action for about five seconds.
CHAT_ACTION_INTERVAL = 4


def compile_callback_data(command: str, args: str = "") -> str:
    """Join *command* and *args* into one ``callback_data`` string."""
    if not args:
        return command
    return f"{command}{CALLBACK_DATA_SEPARATOR}{args}"


def decompile_callback_data(data: str) -> Tuple[str, str]:
    """Split data built by :func:`compile_callback_data` into ``(command, args)``."""
    command, _, args = data.partition(CALLBACK_DATA_SEPARATOR)
    return command, args


def _utf16_slice(text: str, start: int, end: Optional[int] = None) -> str:
    # Entity offsets and lengths count UTF-16 code units.
    encoded = text.encode("utf-16-le")
    stop = None if end is None else end * 2
    return encoded[start * 2:stop].decode("utf-16-le")


def parse_message_command(message: Message) -> Tuple[str, str]:
    """Extract the bot command that starts *message*.

    Looks at the text (or the caption for media messages) for a
    ``bot_command`` entity at offset 0.  A trailing ``@botname`` is dropped.

    Returns:
        ``(command, args)`` without the leading slash, or ``("", "")`` when the
        message does not start with a command.
    """
    if message.text:
        text, entities = message.text, message.entities
    elif message.caption:
        text, entities = message.caption, message.caption_entities
    else:
        return "", ""

    for entity in entities or ():
        if entity.type != MessageEntityType.BOT_COMMAND.value or entity.offset != 0:
            continue
        command = _utf16_slice(text, 1, entity.length)
        command = command.split("@", 1)[0]
        args = _utf16_slice(text, entity.length).strip()
        return command, args
    return "", ""


def start_chat_action(api, params: SendChatActionParams) -> Repeater:
    """Send a chat action now and repeat it every few seconds until stopped.

    Raises:
        TelegramBotException: The first sendChatAction call failed.

    Returns:
        A running :class:`~telegrambot.repeater.Repeater`; call ``stop()`` when done.
    """
    api.send_chat_action(params)

    def resend() -> None:
        try:
            api.send_chat_action(params)
        except TelegramBotException as exc:
            logger.warning(
                "Chat action refresh failed",
                extra={"chat_id": params.chat_id, "action": params.action.value, "error": str(exc)},
            )

    return Repeater(CHAT_ACTION_INTERVAL, resend, name="chat-action", wait_first=True).start()
