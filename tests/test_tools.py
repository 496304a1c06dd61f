"""Tests for callback data, command parsing, chat actions and the repeater."""

import os
import sys
import threading
import time
from unittest.mock import MagicMock, patch

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegrambot.enums import ChatAction
from telegrambot.exceptions import APIException
from telegrambot.models import Message
from telegrambot.params import SendChatActionParams
from telegrambot.repeater import Repeater
from telegrambot.tools import (
    CALLBACK_DATA_SEPARATOR,
    compile_callback_data,
    decompile_callback_data,
    parse_message_command,
    start_chat_action,
)


def _message(text=None, entities=None, caption=None, caption_entities=None) -> Message:
    return Message.model_validate({
        "message_id": 1,
        "date": 0,
        "chat": {"id": 1, "type": "private"},
        "text": text,
        "entities": entities,
        "caption": caption,
        "caption_entities": caption_entities,
    })


def _command_entity(length: int, offset: int = 0) -> dict:
    return {"type": "bot_command", "offset": offset, "length": length}


def _wait_for(predicate, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return False


# ── Callback data ────────────────────────────────────────────────────────────


class TestCallbackData:
    """Validate callback data packing."""

    def test_compile_with_args(self) -> None:
        assert compile_callback_data("vote", "42") == "vote\x0042"
        assert CALLBACK_DATA_SEPARATOR == "\x00"

    def test_compile_without_args(self) -> None:
        assert compile_callback_data("menu") == "menu"

    def test_decompile(self) -> None:
        assert decompile_callback_data("vote\x0042") == ("vote", "42")

    def test_decompile_without_separator(self) -> None:
        assert decompile_callback_data("menu") == ("menu", "")

    def test_args_may_contain_separator(self) -> None:
        assert decompile_callback_data(compile_callback_data("page", "a\x00b")) == ("page", "a\x00b")


# ── Commands ─────────────────────────────────────────────────────────────────


class TestParseMessageCommand:
    """Validate bot command extraction."""

    def test_command_with_args(self) -> None:
        msg = _message("/start ref_123", [_command_entity(6)])
        assert parse_message_command(msg) == ("start", "ref_123")

    def test_bot_mention_stripped(self) -> None:
        msg = _message("/help@my_bot  topic ", [_command_entity(12)])
        assert parse_message_command(msg) == ("help", "topic")

    def test_offsets_count_utf16_units(self) -> None:
        msg = _message("/echo 😀 back", [_command_entity(5)])
        assert parse_message_command(msg) == ("echo", "😀 back")

    def test_caption_command(self) -> None:
        msg = _message(caption="/resize 50%", caption_entities=[_command_entity(7)])
        assert parse_message_command(msg) == ("resize", "50%")

    def test_no_command(self) -> None:
        assert parse_message_command(_message("just text")) == ("", "")

    def test_command_not_at_start(self) -> None:
        msg = _message("see /help", [_command_entity(5, offset=4)])
        assert parse_message_command(msg) == ("", "")

    def test_message_without_text(self) -> None:
        assert parse_message_command(_message()) == ("", "")


# ── Chat actions ─────────────────────────────────────────────────────────────


class TestStartChatAction:
    """Validate the repeating chat action."""

    def test_sent_immediately(self) -> None:
        api = MagicMock()
        params = SendChatActionParams(chat_id=1, action=ChatAction.TYPING)
        repeater = start_chat_action(api, params)
        try:
            api.send_chat_action.assert_called_once_with(params)
        finally:
            repeater.stop()
        assert api.send_chat_action.call_count == 1

    def test_repeats_until_stopped(self) -> None:
        api = MagicMock()
        with patch("telegrambot.tools.CHAT_ACTION_INTERVAL", 0.02):
            repeater = start_chat_action(api, SendChatActionParams(chat_id=1, action="upload_photo"))
            try:
                assert _wait_for(lambda: api.send_chat_action.call_count >= 3)
            finally:
                repeater.stop()
        calls = api.send_chat_action.call_count
        time.sleep(0.1)
        assert api.send_chat_action.call_count == calls

    def test_refresh_failure_keeps_repeating(self) -> None:
        api = MagicMock()
        calls = []

        def send(params) -> None:
            calls.append(params)
            if len(calls) == 2:
                raise APIException(429, "Too Many Requests")

        api.send_chat_action.side_effect = send
        with patch("telegrambot.tools.CHAT_ACTION_INTERVAL", 0.02):
            repeater = start_chat_action(api, SendChatActionParams(chat_id=1, action="typing"))
            try:
                assert _wait_for(lambda: api.send_chat_action.call_count >= 3)
                assert repeater.running
            finally:
                repeater.stop()

    def test_first_failure_raises(self) -> None:
        api = MagicMock()
        api.send_chat_action.side_effect = APIException(400, "Bad Request: chat not found")
        with pytest.raises(APIException):
            start_chat_action(api, SendChatActionParams(chat_id=1, action="typing"))


# ── Repeater ─────────────────────────────────────────────────────────────────


class TestRepeater:
    """Validate the background repeater."""

    def test_runs_immediately_and_repeatedly(self) -> None:
        fn = MagicMock()
        repeater = Repeater(0.01, fn, name="test").start()
        try:
            assert _wait_for(lambda: fn.call_count >= 3)
        finally:
            repeater.stop()
        assert not repeater.running
        assert repeater.stop_event.is_set()

    def test_wait_first(self) -> None:
        fn = MagicMock()
        repeater = Repeater(10, fn, wait_first=True).start()
        repeater.stop()
        fn.assert_not_called()

    def test_stop_wakes_long_interval(self) -> None:
        fn = MagicMock()
        repeater = Repeater(60, fn).start()
        assert _wait_for(lambda: fn.call_count == 1)
        started = time.monotonic()
        repeater.stop()
        assert time.monotonic() - started < 5

    def test_stop_from_inside_fn(self) -> None:
        holder = {}

        def fn() -> None:
            holder["repeater"].stop()

        holder["repeater"] = repeater = Repeater(0, fn)
        repeater.start()
        assert _wait_for(lambda: not repeater.running)
        repeater.stop()

    def test_exception_ends_loop(self) -> None:
        fn = MagicMock(side_effect=ValueError("boom"))
        repeater = Repeater(0, fn)
        with patch("threading.excepthook"):
            repeater.start()
            assert _wait_for(lambda: not repeater.running)
        assert fn.call_count == 1
        assert repeater.stop_event.is_set()

    def test_cannot_start_twice(self) -> None:
        repeater = Repeater(1, MagicMock(), wait_first=True).start()
        try:
            with pytest.raises(RuntimeError):
                repeater.start()
        finally:
            repeater.stop()

    def test_stop_before_start(self) -> None:
        repeater = Repeater(1, MagicMock())
        repeater.stop()
        assert not repeater.running
        assert isinstance(repeater.stop_event, threading.Event)
