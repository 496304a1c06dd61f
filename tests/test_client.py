"""Tests for the API dispatcher, soft-failure handling and endpoint wrappers."""

import json
import os
import sys
import threading
from unittest.mock import MagicMock, patch

import pytest
import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegrambot.client import API, NeedsMigration, Success, new_api
from telegrambot.exceptions import (
    APIException,
    ChatMigratedException,
    DecodeException,
    RateLimitException,
    RequestCancelledException,
    TelegramBotException,
    TransportException,
)
from telegrambot.files import FileID, FileReader
from telegrambot.models import (
    Chat,
    ChatInviteLink,
    File,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InputMedia,
    InputMessageContent,
    Message,
    User,
)
from telegrambot.params import (
    AnswerInlineQueryParams,
    CreateChatInviteLinkParams,
    EditMessageTextParams,
    GetChatParams,
    SendMediaGroupParams,
    SendMessageParams,
    SendPhotoParams,
    SetGameScoreParams,
    UploadStickerFileParams,
)

TOKEN = "123:ABC"
ENDPOINT = "https://api.example.com/bot"

USER = {"id": 1, "is_bot": True, "first_name": "Bot", "username": "test_bot"}
MESSAGE = {
    "message_id": 7,
    "date": 1700000000,
    "chat": {"id": -100, "type": "supergroup", "title": "Group"},
    "text": "hi",
}


def _ok(result=True) -> bytes:
    return json.dumps({"ok": True, "result": result}).encode("utf-8")


def _error(code: int, description: str, **parameters) -> bytes:
    body = {"ok": False, "error_code": code, "description": description}
    if parameters:
        body["parameters"] = parameters
    return json.dumps(body).encode("utf-8")


def _api(transport: MagicMock, **kwargs) -> API:
    return API(TOKEN, ENDPOINT, transport, **kwargs)


def _sent_body(transport: MagicMock, index: int = 0) -> bytes:
    return transport.call_args_list[index].args[3]


def _sent_json(transport: MagicMock, index: int = 0) -> dict:
    return json.loads(_sent_body(transport, index))


def _sent_headers(transport: MagicMock, index: int = 0) -> dict:
    return transport.call_args_list[index].args[2]


# ── Exceptions ───────────────────────────────────────────────────────────────


class TestExceptions:
    """Validate the error taxonomy."""

    def test_api_exception_attributes(self) -> None:
        exc = APIException(403, "Forbidden: bot was blocked by the user", method="sendMessage")
        assert exc.error_code == 403
        assert exc.description == "Forbidden: bot was blocked by the user"
        assert "403" in str(exc)
        assert "sendMessage" in str(exc)

    def test_api_exception_default_description(self) -> None:
        exc = APIException(500)
        assert exc.parameters == {}
        assert "Unknown error" in str(exc)

    def test_hierarchy(self) -> None:
        assert issubclass(RateLimitException, APIException)
        assert issubclass(ChatMigratedException, APIException)
        assert issubclass(TransportException, TelegramBotException)
        assert issubclass(DecodeException, TelegramBotException)

    def test_chat_migrated_carries_new_id(self) -> None:
        exc = ChatMigratedException(-1001, method="getMe")
        assert exc.new_chat_id == -1001
        assert exc.parameters == {"migrate_to_chat_id": -1001}


# ── Construction ─────────────────────────────────────────────────────────────


class TestAPIInit:
    """Validate URL building."""

    def test_method_url(self) -> None:
        api = _api(MagicMock())
        assert api.method_url("getMe") == "https://api.example.com/bot123:ABC/getMe"

    def test_default_endpoint(self) -> None:
        api = API(TOKEN, http_do_request=MagicMock())
        assert api.method_url("getMe") == "https://api.telegram.org/bot123:ABC/getMe"

    def test_file_url(self) -> None:
        api = _api(MagicMock())
        assert api.file_url("photos/a.jpg") == "https://api.telegram.org/file/bot123:ABC/photos/a.jpg"

    def test_download_file(self, make_transport) -> None:
        transport = make_transport(b"\x89PNG")
        api = API(TOKEN, ENDPOINT, transport, file_endpoint_url="https://files.example.com/bot")
        assert api.download_file("photos/a.png") == b"\x89PNG"
        transport.assert_called_once_with("GET", "https://files.example.com/bot123:ABC/photos/a.png", {}, b"")


# ── Dispatcher ───────────────────────────────────────────────────────────────


class TestDispatch:
    """Validate encoding choice, envelope handling and the soft-failure protocol."""

    def test_success_json(self, make_transport) -> None:
        transport = make_transport(_ok(USER))
        outcome = _api(transport).dispatch("getMe", None, None, User)
        assert isinstance(outcome, Success)
        assert outcome.result.username == "test_bot"
        method, url, headers, body = transport.call_args.args
        assert method == "POST"
        assert url == "https://api.example.com/bot123:ABC/getMe"
        assert headers == {"Content-Type": "application/json"}
        assert body == b"{}"

    def test_params_encoded_without_unset_fields(self, make_transport) -> None:
        transport = make_transport(_ok(MESSAGE))
        _api(transport).dispatch("sendMessage", SendMessageParams(chat_id=42, text="hello"))
        assert _sent_json(transport) == {"chat_id": 42, "text": "hello"}

    def test_mapping_params(self, make_transport) -> None:
        transport = make_transport(_ok(MESSAGE))
        _api(transport).dispatch("sendMessage", {"chat_id": 42, "text": "x", "parse_mode": None})
        assert _sent_json(transport) == {"chat_id": 42, "text": "x"}

    def test_mapping_params_with_uploaded_media(self, make_transport, parse_multipart) -> None:
        transport = make_transport(_ok([MESSAGE]))
        reader = FileReader("a.jpg", b"AAA")
        _api(transport).dispatch("sendMediaGroup", {"chat_id": 1, "media": [InputMedia(type="photo", media=reader)]}, [reader])
        content_type = _sent_headers(transport)["Content-Type"]
        parts = {part["name"]: part for part in parse_multipart(content_type, _sent_body(transport))}
        assert json.loads(parts["media"]["content"]) == [{"type": "photo", "media": "attach://file0"}]
        assert parts["file0"]["content"] == b"AAA"

    def test_raw_result_without_type(self, make_transport) -> None:
        transport = make_transport(_ok(5))
        assert _api(transport).dispatch("getChatMemberCount").result == 5

    def test_migration_returned_after_one_call(self, make_transport) -> None:
        transport = make_transport(_error(400, "Bad Request: group chat was upgraded", migrate_to_chat_id=-1009))
        outcome = _api(transport).dispatch("sendMessage", SendMessageParams(chat_id=-100, text="x"))
        assert outcome == NeedsMigration(-1009)
        assert transport.call_count == 1

    def test_migration_takes_precedence_over_retry_after(self, make_transport) -> None:
        transport = make_transport(_error(400, "migrated", migrate_to_chat_id=-1009, retry_after=5))
        with patch("telegrambot.client._sleep") as mock_sleep:
            outcome = _api(transport).dispatch("sendMessage", {"chat_id": -100, "text": "x"})
        assert outcome == NeedsMigration(-1009)
        mock_sleep.assert_not_called()

    def test_retry_after_resends_same_body(self, make_transport) -> None:
        transport = make_transport(_error(429, "Too Many Requests: retry after 3", retry_after=3), _ok(MESSAGE))
        with patch("telegrambot.client._sleep") as mock_sleep:
            outcome = _api(transport).dispatch(
                "sendMessage", SendMessageParams(chat_id=42, text="hello"), result_type=Message
            )
        assert isinstance(outcome, Success)
        assert outcome.result.message_id == 7
        assert transport.call_count == 2
        mock_sleep.assert_called_once_with(3, None)
        assert _sent_body(transport, 0) == _sent_body(transport, 1)
        assert _sent_headers(transport, 0) == _sent_headers(transport, 1)

    def test_repeated_retry_after_is_unbounded_by_default(self, make_transport) -> None:
        rate = _error(429, "Too Many Requests", retry_after=1)
        transport = make_transport(rate, rate, rate, _ok())
        with patch("telegrambot.client._sleep") as mock_sleep:
            outcome = _api(transport).dispatch("deleteMessage", {"chat_id": 1, "message_id": 2})
        assert outcome == Success(True)
        assert mock_sleep.call_count == 3

    def test_retry_cap(self, make_transport) -> None:
        rate = _error(429, "Too Many Requests", retry_after=2)
        transport = make_transport(rate, rate)
        with patch("telegrambot.client._sleep") as mock_sleep:
            with pytest.raises(RateLimitException) as info:
                _api(transport, max_rate_limit_retries=1).dispatch("sendMessage", {"chat_id": 1, "text": "x"})
        assert info.value.retry_after == 2
        assert info.value.attempts == 2
        assert transport.call_count == 2
        assert mock_sleep.call_count == 1

    def test_cancelled_rate_limit_wait(self, make_transport) -> None:
        transport = make_transport(_error(429, "Too Many Requests", retry_after=30))
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(RequestCancelledException):
            _api(transport).dispatch("sendMessage", {"chat_id": 1, "text": "x"}, cancel_event=cancel)
        assert transport.call_count == 1

    def test_hard_error(self, make_transport) -> None:
        transport = make_transport(_error(400, "Bad Request: chat not found"))
        with pytest.raises(APIException) as info:
            _api(transport).dispatch("sendMessage", {"chat_id": 1, "text": "x"})
        assert info.value.error_code == 400
        assert info.value.description == "Bad Request: chat not found"
        assert info.value.method == "sendMessage"

    def test_zero_parameters_are_hard_error(self, make_transport) -> None:
        transport = make_transport(_error(400, "Bad Request", retry_after=0, migrate_to_chat_id=0))
        with patch("telegrambot.client._sleep") as mock_sleep:
            with pytest.raises(APIException):
                _api(transport).dispatch("sendMessage", {"chat_id": 1, "text": "x"})
        mock_sleep.assert_not_called()
        assert transport.call_count == 1

    def test_transport_failure_not_retried(self) -> None:
        transport = MagicMock(side_effect=requests.ConnectionError("connection refused"))
        with pytest.raises(TransportException) as info:
            _api(transport).dispatch("getMe")
        assert info.value.method == "getMe"
        assert transport.call_count == 1

    def test_transport_exception_passes_through(self) -> None:
        transport = MagicMock(side_effect=TransportException("boom"))
        with pytest.raises(TransportException) as info:
            _api(transport).dispatch("getMe")
        assert info.value.method == "getMe"

    def test_malformed_envelope(self, make_transport) -> None:
        transport = make_transport(b"<html>502 Bad Gateway</html>")
        with pytest.raises(DecodeException):
            _api(transport).dispatch("getMe")

    def test_result_type_mismatch(self, make_transport) -> None:
        transport = make_transport(_ok({"id": 1}))
        with pytest.raises(DecodeException):
            _api(transport).dispatch("getMe", result_type=User)

    def test_multipart_when_uploading(self, make_transport, parse_multipart) -> None:
        transport = make_transport(_ok(MESSAGE))
        params = SendPhotoParams(chat_id=42, photo=FileReader("cat.jpg", b"\xff\xd8jpeg"), caption="look")
        _api(transport).dispatch("sendPhoto", params, [params.photo], Message)
        content_type = _sent_headers(transport)["Content-Type"]
        assert content_type.startswith("multipart/form-data; boundary=")
        parts = {part["name"]: part for part in parse_multipart(content_type, _sent_body(transport))}
        assert parts["chat_id"]["content"] == b"42"
        assert parts["caption"]["content"] == b"look"
        attach_name = parts["photo"]["content"].decode().removeprefix("attach://")
        assert parts[attach_name]["filename"] == "cat.jpg"
        assert parts[attach_name]["content"] == b"\xff\xd8jpeg"


# ── Endpoint wrappers ────────────────────────────────────────────────────────


class TestWrappers:
    """Validate wrapper method names, result types and migration follow-up."""

    def test_get_me(self, make_transport) -> None:
        transport = make_transport(_ok(USER))
        me = _api(transport).get_me()
        assert isinstance(me, User)
        assert me.id == 1

    def test_send_message_follows_migration(self, make_transport) -> None:
        transport = make_transport(_error(400, "migrated", migrate_to_chat_id=-1009), _ok(MESSAGE))
        params = SendMessageParams(chat_id=-100, text="hello")
        msg = _api(transport).send_message(params)
        assert isinstance(msg, Message)
        assert params.chat_id == -1009
        assert _sent_json(transport, 0)["chat_id"] == -100
        assert _sent_json(transport, 1)["chat_id"] == -1009
        assert transport.call_count == 2

    def test_migration_without_chat_id_raises(self, make_transport) -> None:
        transport = make_transport(_error(400, "migrated", migrate_to_chat_id=-1009))
        with pytest.raises(ChatMigratedException) as info:
            _api(transport).get_me()
        assert info.value.new_chat_id == -1009

    def test_repeated_migration_raises(self, make_transport) -> None:
        migrated = _error(400, "migrated", migrate_to_chat_id=-1009)
        transport = make_transport(migrated, migrated)
        with pytest.raises(ChatMigratedException):
            _api(transport).send_message(SendMessageParams(chat_id=-100, text="x"))
        assert transport.call_count == 2

    def test_migration_reuploads_stream(self, make_transport, parse_multipart) -> None:
        import io

        transport = make_transport(_error(400, "migrated", migrate_to_chat_id=-1009), _ok(MESSAGE))
        params = SendPhotoParams(chat_id=-100, photo=FileReader("a.png", io.BytesIO(b"png-bytes")))
        _api(transport).send_photo(params)
        second = parse_multipart(_sent_headers(transport, 1)["Content-Type"], _sent_body(transport, 1))
        contents = [part["content"] for part in second if part["filename"] == "a.png"]
        assert contents == [b"png-bytes"]

    def test_send_photo_by_file_id_uses_json(self, make_transport) -> None:
        transport = make_transport(_ok(MESSAGE))
        _api(transport).send_photo(SendPhotoParams(chat_id=42, photo=FileID("AgADBAAD")))
        assert _sent_headers(transport)["Content-Type"] == "application/json"
        assert _sent_json(transport) == {"chat_id": 42, "photo": "AgADBAAD"}

    def test_send_message_reply_markup(self, make_transport) -> None:
        transport = make_transport(_ok(MESSAGE))
        markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="Go", callback_data="go")]])
        _api(transport).send_message(SendMessageParams(chat_id=42, text="x", parse_mode="HTML", reply_markup=markup))
        sent = _sent_json(transport)
        assert sent["parse_mode"] == "HTML"
        assert sent["reply_markup"] == {"inline_keyboard": [[{"text": "Go", "callback_data": "go"}]]}

    def test_send_media_group_attaches_each_item(self, make_transport, parse_multipart) -> None:
        transport = make_transport(_ok([MESSAGE, MESSAGE]))
        params = SendMediaGroupParams(
            chat_id=42,
            media=[
                InputMedia(type="photo", media=FileReader("a.jpg", b"AAA")),
                InputMedia(type="photo", media=FileReader("b.jpg", b"BBB")),
                InputMedia(type="photo", media=FileID("AgAD")),
            ],
        )
        messages = _api(transport).send_media_group(params)
        assert len(messages) == 2
        content_type = _sent_headers(transport)["Content-Type"]
        parts = {part["name"]: part for part in parse_multipart(content_type, _sent_body(transport))}
        media = json.loads(parts["media"]["content"])
        assert media[2] == {"type": "photo", "media": "AgAD"}
        for item, expected in zip(media[:2], (b"AAA", b"BBB")):
            name = item["media"].removeprefix("attach://")
            assert parts[name]["content"] == expected
        assert len(parts) == 4

    def test_create_chat_invite_link_method(self, make_transport) -> None:
        link = {
            "invite_link": "https://t.me/+abc",
            "creator": USER,
            "creates_join_request": False,
            "is_primary": False,
            "is_revoked": False,
        }
        transport = make_transport(_ok(link))
        result = _api(transport).create_chat_invite_link(CreateChatInviteLinkParams(chat_id=-100))
        assert isinstance(result, ChatInviteLink)
        assert transport.call_args.args[1].endswith("/createChatInviteLink")

    def test_upload_sticker_file_method(self, make_transport) -> None:
        transport = make_transport(_ok({"file_id": "f", "file_unique_id": "u"}))
        result = _api(transport).upload_sticker_file(
            UploadStickerFileParams(user_id=5, png_sticker=FileReader("s.png", b"png"))
        )
        assert isinstance(result, File)
        assert transport.call_args.args[1].endswith("/uploadStickerFile")

    def test_answer_inline_query_method(self, make_transport) -> None:
        transport = make_transport(_ok())
        result = InlineQueryResult(
            type="article",
            id="1",
            title="Title",
            input_message_content=InputMessageContent(message_text="text"),
        )
        assert _api(transport).answer_inline_query(
            AnswerInlineQueryParams(inline_query_id="q1", results=[result])
        ) is None
        assert transport.call_args.args[1].endswith("/answerInlineQuery")
        assert _sent_json(transport)["results"][0]["input_message_content"] == {"message_text": "text"}

    def test_get_chat_returns_chat(self, make_transport) -> None:
        transport = make_transport(_ok({"id": -100, "type": "supergroup", "title": "Group"}))
        chat = _api(transport).get_chat(GetChatParams(chat_id="@group"))
        assert isinstance(chat, Chat)
        assert chat.title == "Group"
        assert _sent_json(transport) == {"chat_id": "@group"}

    def test_inline_edit_returns_true(self, make_transport) -> None:
        transport = make_transport(_ok(True))
        result = _api(transport).edit_message_text(EditMessageTextParams(inline_message_id="im1", text="new"))
        assert result is True

    def test_set_game_score_returns_message(self, make_transport) -> None:
        transport = make_transport(_ok(MESSAGE))
        result = _api(transport).set_game_score(SetGameScoreParams(user_id=1, score=10, chat_id=-100, message_id=7))
        assert isinstance(result, Message)


class TestNewAPI:
    """Validate the token-checking constructor."""

    def test_returns_client_and_bot_user(self, make_transport) -> None:
        transport = make_transport(_ok(USER))
        api, me = new_api(TOKEN, endpoint_url=ENDPOINT, http_do_request=transport)
        assert isinstance(api, API)
        assert me.username == "test_bot"
        assert transport.call_args.args[1] == "https://api.example.com/bot123:ABC/getMe"

    def test_bad_token(self, make_transport) -> None:
        transport = make_transport(_error(401, "Unauthorized"))
        with pytest.raises(APIException) as info:
            new_api("bad", endpoint_url=ENDPOINT, http_do_request=transport)
        assert info.value.error_code == 401
