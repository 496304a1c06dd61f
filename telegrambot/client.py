"""API -- call dispatcher and typed wrappers for every Telegram Bot API method.

:meth:`API.dispatch` is the single place where requests are encoded, sent
through the transport and decoded.  It handles the Bot API soft-failure
protocol:

* ``parameters.migrate_to_chat_id`` -- returned to the caller as
  :class:`NeedsMigration`, never retried internally.
* ``parameters.retry_after`` -- waited out, then the *same* encoded body is
  sent again until the provider accepts it.

The endpoint wrappers (``send_message``, ``get_chat``, ...) take a params
model from :mod:`telegrambot.params` and return the typed result.  They follow
a chat migration by rewriting ``params.chat_id`` and issuing the call once more.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union

import requests
from pydantic import BaseModel

from telegrambot.decoder import decode_response, decode_result
from telegrambot.encoder import encode_request
from telegrambot.exceptions import (
    APIException,
    ChatMigratedException,
    RateLimitException,
    RequestCancelledException,
    TransportException,
)
from telegrambot.models import (
    BotCommand,
    Chat,
    ChatAdministratorRights,
    ChatInviteLink,
    ChatMember,
    File,
    GameHighScore,
    MenuButton,
    Message,
    MessageIDObject,
    Poll,
    SentWebAppMessage,
    StickerSet,
    Update,
    User,
    UserProfilePhotos,
    WebhookInfo,
)
from telegrambot.params import (
    AddStickerToSetParams,
    AnswerCallbackQueryParams,
    AnswerInlineQueryParams,
    AnswerPreCheckoutQueryParams,
    AnswerShippingQueryParams,
    AnswerWebAppQueryParams,
    ApproveChatJoinRequestParams,
    BanChatMemberParams,
    BanChatSenderChatParams,
    CopyMessageParams,
    CreateChatInviteLinkParams,
    CreateInvoiceLinkParams,
    CreateNewStickerSetParams,
    DeclineChatJoinRequestParams,
    DeleteChatPhotoParams,
    DeleteChatStickerSetParams,
    DeleteMessageParams,
    DeleteMyCommandsParams,
    DeleteStickerFromSetParams,
    DeleteWebhookParams,
    EditChatInviteLinkParams,
    EditMessageCaptionParams,
    EditMessageLiveLocationParams,
    EditMessageMediaParams,
    EditMessageReplyMarkupParams,
    EditMessageTextParams,
    ExportChatInviteLinkParams,
    ForwardMessageParams,
    GetChatAdministratorsParams,
    GetChatMemberCountParams,
    GetChatMemberParams,
    GetChatMenuButtonParams,
    GetChatParams,
    GetFileParams,
    GetGameHighScoresParams,
    GetMyCommandsParams,
    GetMyDefaultAdministratorRightsParams,
    GetStickerSetParams,
    GetUpdatesParams,
    GetUserProfilePhotosParams,
    LeaveChatParams,
    PinChatMessageParams,
    PromoteChatMemberParams,
    RestrictChatMemberParams,
    RevokeChatInviteLinkParams,
    SendAnimationParams,
    SendAudioParams,
    SendChatActionParams,
    SendContactParams,
    SendDiceParams,
    SendDocumentParams,
    SendGameParams,
    SendInvoiceParams,
    SendLocationParams,
    SendMediaGroupParams,
    SendMessageParams,
    SendPhotoParams,
    SendPollParams,
    SendStickerParams,
    SendVenueParams,
    SendVideoNoteParams,
    SendVideoParams,
    SendVoiceParams,
    SetChatAdministratorCustomTitleParams,
    SetChatDescriptionParams,
    SetChatMenuButtonParams,
    SetChatPermissionsParams,
    SetChatPhotoParams,
    SetChatStickerSetParams,
    SetChatTitleParams,
    SetGameScoreParams,
    SetMyCommandsParams,
    SetMyDefaultAdministratorRightsParams,
    SetPassportDataErrorsParams,
    SetStickerPositionInSetParams,
    SetStickerSetThumbParams,
    SetWebhookParams,
    StopMessageLiveLocationParams,
    StopPollParams,
    UnbanChatMemberParams,
    UnbanChatSenderChatParams,
    UnpinAllChatMessagesParams,
    UnpinChatMessageParams,
    UploadStickerFileParams,
)
from telegrambot.transport import DEFAULT_TIMEOUT, HttpDoRequest, RequestsTransport

logger = logging.getLogger(__name__)

DEFAULT_API_ENDPOINT_URL = "https://api.telegram.org/bot"
DEFAULT_FILE_ENDPOINT_URL = "https://api.telegram.org/file/bot"


# ── Call outcomes ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Success:
    """The call succeeded; *result* is the decoded ``result`` field."""

    result: Any = None


@dataclass(frozen=True)
class NeedsMigration:
    """The target group became a supergroup; re-issue the call against *chat_id*."""

    chat_id: int


CallOutcome = Union[Success, NeedsMigration]

# Edits of inline messages return True instead of the edited message.
MessageOrTrue = Union[Message, bool]


def _sleep(seconds: float, cancel_event: Optional[threading.Event] = None) -> None:
    """Wait *seconds*, returning early with an error if *cancel_event* is set."""
    if cancel_event is None:
        time.sleep(seconds)
        return
    if cancel_event.wait(seconds):
        raise RequestCancelledException(f"rate-limit wait of {seconds}s cancelled")


def _has_chat_id(params: Any) -> bool:
    return isinstance(params, BaseModel) and "chat_id" in type(params).model_fields


class API:
    """Telegram Bot API client.

    Holds only immutable configuration and a thread-safe transport, so one
    instance may be shared by any number of threads.

    Args:
        token: Bot token issued by @BotFather.
        endpoint_url: URL prefix the token and method name are appended to.
        http_do_request: Transport callable; defaults to :class:`RequestsTransport`.
        max_rate_limit_retries: Give up with :class:`RateLimitException` after
            this many ``retry_after`` answers for one call.  ``None`` retries
            for as long as the provider asks.
        file_endpoint_url: URL prefix used to download files.
    """

    def __init__(
        self,
        token: str,
        endpoint_url: str = DEFAULT_API_ENDPOINT_URL,
        http_do_request: Optional[HttpDoRequest] = None,
        *,
        max_rate_limit_retries: Optional[int] = None,
        file_endpoint_url: str = DEFAULT_FILE_ENDPOINT_URL,
    ) -> None:
        self._token = token
        self._endpoint_url = endpoint_url
        self._file_endpoint_url = file_endpoint_url
        self._http_do_request: HttpDoRequest = http_do_request or RequestsTransport(DEFAULT_TIMEOUT)
        self._max_rate_limit_retries = max_rate_limit_retries

    @classmethod
    def from_env(cls) -> "API":
        """Build a client from the environment settings in :mod:`config`.

        Raises:
            ValueError: ``BOT_TOKEN`` is not configured.
        """
        import config  # deferred so importing the library never reads the environment

        if not config.BOT_TOKEN:
            raise ValueError("BOT_TOKEN is not set")
        return cls(
            config.BOT_TOKEN,
            config.API_ENDPOINT_URL,
            RequestsTransport(config.REQUEST_TIMEOUT),
            max_rate_limit_retries=config.MAX_RATE_LIMIT_RETRIES,
            file_endpoint_url=config.FILE_ENDPOINT_URL,
        )

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------

    def method_url(self, method: str) -> str:
        """Return the full URL of *method*."""
        return f"{self._endpoint_url}{self._token}/{method}"

    def dispatch(
        self,
        method: str,
        params: Any = None,
        files: Optional[Iterable[Any]] = None,
        result_type: Any = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> CallOutcome:
        """Issue one Bot API call.

        Args:
            method: Bot API method name, e.g. ``"sendMessage"``.
            params: Params model, mapping or ``None``.
            files: File references contained in *params*; ``None`` entries are skipped.
            result_type: Type the ``result`` field is decoded into.
            cancel_event: Interrupts a pending rate-limit wait when set.

        Returns:
            :class:`Success` with the decoded result, or :class:`NeedsMigration`.

        Raises:
            EncodeException: *params* cannot be serialised.
            TransportException: The transport failed.
            DecodeException: The response is malformed.
            APIException: The provider rejected the call.
            RateLimitException: ``max_rate_limit_retries`` was exceeded.
            RequestCancelledException: *cancel_event* fired during a rate-limit wait.
        """
        request = encode_request(params, files)
        url = self.method_url(method)
        headers = {"Content-Type": request.content_type}
        attempts = 0

        while True:
            attempts += 1
            logger.debug("Calling Bot API", extra={"api_method": method, "attempt": attempts})
            try:
                raw = self._http_do_request("POST", url, headers, request.body)
            except TransportException as exc:
                if exc.method is None:
                    exc.method = method
                raise
            except (requests.RequestException, OSError) as exc:
                logger.error("Transport failure", extra={"api_method": method, "error": str(exc)})
                raise TransportException(f"{method}: {exc}", method=method) from exc

            response = decode_response(raw)
            if response.ok:
                return Success(decode_result(response.result, result_type))

            if response.parameters is not None:
                if response.migrate_to_chat_id:
                    logger.info(
                        "Chat migrated",
                        extra={"api_method": method, "migrate_to_chat_id": response.migrate_to_chat_id},
                    )
                    return NeedsMigration(response.migrate_to_chat_id)

                if response.retry_after:
                    cap = self._max_rate_limit_retries
                    if cap is not None and attempts > cap:
                        raise RateLimitException(
                            response.retry_after,
                            attempts,
                            response.error_code,
                            response.description,
                            method,
                        )
                    logger.warning(
                        "Rate limited, retrying",
                        extra={"api_method": method, "retry_after": response.retry_after, "attempt": attempts},
                    )
                    _sleep(response.retry_after, cancel_event)
                    continue

            logger.error(
                "Bot API error",
                extra={"api_method": method, "error_code": response.error_code, "error": response.description},
            )
            raise APIException(
                response.error_code,
                response.description,
                response.parameters.model_dump(exclude_none=True) if response.parameters else None,
                method,
            )

    def _call(
        self,
        method: str,
        params: Any = None,
        result_type: Any = None,
        files: Optional[Iterable[Any]] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> Any:
        """Dispatch *method* and follow a chat migration once.

        On :class:`NeedsMigration` the caller-owned ``params.chat_id`` is set to
        the new chat and the call is re-issued.

        Raises:
            ChatMigratedException: *params* has no ``chat_id`` or the chat migrated again.
        """
        files = list(files or ())
        outcome = self.dispatch(method, params, files, result_type, cancel_event=cancel_event)
        if isinstance(outcome, NeedsMigration):
            if not _has_chat_id(params):
                raise ChatMigratedException(outcome.chat_id, method)
            params.chat_id = outcome.chat_id
            outcome = self.dispatch(method, params, files, result_type, cancel_event=cancel_event)
            if isinstance(outcome, NeedsMigration):
                raise ChatMigratedException(outcome.chat_id, method)
        return outcome.result

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def file_url(self, file_path: str) -> str:
        """Return the download URL of a :class:`~telegrambot.models.File` path."""
        return f"{self._file_endpoint_url}{self._token}/{file_path}"

    def download_file(self, file_path: str) -> bytes:
        """Download the raw content behind a ``File.file_path``.

        Raises:
            TransportException: The transport failed.
        """
        try:
            return self._http_do_request("GET", self.file_url(file_path), {}, b"")
        except (requests.RequestException, OSError) as exc:
            raise TransportException(f"download failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Getting updates
    # ------------------------------------------------------------------

    def get_updates(
        self,
        params: Optional[GetUpdatesParams] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[Update]:
        """Receive incoming updates using long polling."""
        return self._call("getUpdates", params, List[Update], cancel_event=cancel_event)

    def set_webhook(self, params: SetWebhookParams) -> None:
        """Specify a URL to receive incoming updates via an outgoing webhook."""
        self._call("setWebhook", params, files=[params.certificate])

    def delete_webhook(self, params: Optional[DeleteWebhookParams] = None) -> None:
        """Remove the webhook integration."""
        self._call("deleteWebhook", params)

    def get_webhook_info(self) -> WebhookInfo:
        """Get the current webhook status."""
        return self._call("getWebhookInfo", None, WebhookInfo)

    # ------------------------------------------------------------------
    # Available methods
    # ------------------------------------------------------------------

    def get_me(self) -> User:
        """Return basic information about the bot."""
        return self._call("getMe", None, User)

    def log_out(self) -> None:
        """Log out from the cloud Bot API server before launching the bot locally."""
        self._call("logOut")

    def close(self) -> None:
        """Close the bot instance before moving it from one local server to another."""
        self._call("close")

    def send_message(self, params: SendMessageParams) -> Message:
        """Send a text message."""
        return self._call("sendMessage", params, Message)

    def forward_message(self, params: ForwardMessageParams) -> Message:
        """Forward a message of any kind."""
        return self._call("forwardMessage", params, Message)

    def copy_message(self, params: CopyMessageParams) -> MessageIDObject:
        """Copy a message without a link to the original."""
        return self._call("copyMessage", params, MessageIDObject)

    def send_photo(self, params: SendPhotoParams) -> Message:
        """Send a photo."""
        return self._call("sendPhoto", params, Message, [params.photo])

    def send_audio(self, params: SendAudioParams) -> Message:
        """Send an audio file to be displayed in the music player."""
        return self._call("sendAudio", params, Message, [params.audio, params.thumb])

    def send_document(self, params: SendDocumentParams) -> Message:
        """Send a general file."""
        return self._call("sendDocument", params, Message, [params.document, params.thumb])

    def send_video(self, params: SendVideoParams) -> Message:
        """Send a video file."""
        return self._call("sendVideo", params, Message, [params.video, params.thumb])

    def send_animation(self, params: SendAnimationParams) -> Message:
        """Send an animation (GIF or soundless H.264 video)."""
        return self._call("sendAnimation", params, Message, [params.animation, params.thumb])

    def send_voice(self, params: SendVoiceParams) -> Message:
        """Send a voice message."""
        return self._call("sendVoice", params, Message, [params.voice])

    def send_video_note(self, params: SendVideoNoteParams) -> Message:
        """Send a rounded square video message."""
        return self._call("sendVideoNote", params, Message, [params.video_note, params.thumb])

    def send_media_group(self, params: SendMediaGroupParams) -> List[Message]:
        """Send a group of photos, videos, documents or audios as an album."""
        files = [file for media in params.media for file in (media.media, media.thumb)]
        return self._call("sendMediaGroup", params, List[Message], files)

    def send_location(self, params: SendLocationParams) -> Message:
        """Send a point on the map."""
        return self._call("sendLocation", params, Message)

    def edit_message_live_location(self, params: EditMessageLiveLocationParams) -> MessageOrTrue:
        """Edit a live location message."""
        return self._call("editMessageLiveLocation", params, MessageOrTrue)

    def stop_message_live_location(self, params: StopMessageLiveLocationParams) -> MessageOrTrue:
        """Stop updating a live location message."""
        return self._call("stopMessageLiveLocation", params, MessageOrTrue)

    def send_venue(self, params: SendVenueParams) -> Message:
        """Send information about a venue."""
        return self._call("sendVenue", params, Message)

    def send_contact(self, params: SendContactParams) -> Message:
        """Send a phone contact."""
        return self._call("sendContact", params, Message)

    def send_poll(self, params: SendPollParams) -> Message:
        """Send a native poll."""
        return self._call("sendPoll", params, Message)

    def send_dice(self, params: SendDiceParams) -> Message:
        """Send an animated emoji that displays a random value."""
        return self._call("sendDice", params, Message)

    def send_chat_action(self, params: SendChatActionParams) -> None:
        """Tell the user that something is happening on the bot's side."""
        self._call("sendChatAction", params)

    def get_user_profile_photos(self, params: GetUserProfilePhotosParams) -> UserProfilePhotos:
        """Get a list of profile pictures for a user."""
        return self._call("getUserProfilePhotos", params, UserProfilePhotos)

    def get_file(self, params: GetFileParams) -> File:
        """Get basic info about a file and prepare it for downloading."""
        return self._call("getFile", params, File)

    def ban_chat_member(self, params: BanChatMemberParams) -> None:
        """Ban a user in a group, a supergroup or a channel."""
        self._call("banChatMember", params)

    def unban_chat_member(self, params: UnbanChatMemberParams) -> None:
        """Unban a previously banned user."""
        self._call("unbanChatMember", params)

    def restrict_chat_member(self, params: RestrictChatMemberParams) -> None:
        """Restrict a user in a supergroup."""
        self._call("restrictChatMember", params)

    def promote_chat_member(self, params: PromoteChatMemberParams) -> None:
        """Promote or demote a user in a supergroup or a channel."""
        self._call("promoteChatMember", params)

    def set_chat_administrator_custom_title(self, params: SetChatAdministratorCustomTitleParams) -> None:
        """Set a custom title for an administrator promoted by the bot."""
        self._call("setChatAdministratorCustomTitle", params)

    def ban_chat_sender_chat(self, params: BanChatSenderChatParams) -> None:
        """Ban a channel chat in a supergroup or a channel."""
        self._call("banChatSenderChat", params)

    def unban_chat_sender_chat(self, params: UnbanChatSenderChatParams) -> None:
        """Unban a previously banned channel chat."""
        self._call("unbanChatSenderChat", params)

    def set_chat_permissions(self, params: SetChatPermissionsParams) -> None:
        """Set default chat permissions for all members."""
        self._call("setChatPermissions", params)

    def export_chat_invite_link(self, params: ExportChatInviteLinkParams) -> str:
        """Generate a new primary invite link for a chat."""
        return self._call("exportChatInviteLink", params, str)

    def create_chat_invite_link(self, params: CreateChatInviteLinkParams) -> ChatInviteLink:
        """Create an additional invite link for a chat."""
        return self._call("createChatInviteLink", params, ChatInviteLink)

    def edit_chat_invite_link(self, params: EditChatInviteLinkParams) -> ChatInviteLink:
        """Edit a non-primary invite link created by the bot."""
        return self._call("editChatInviteLink", params, ChatInviteLink)

    def revoke_chat_invite_link(self, params: RevokeChatInviteLinkParams) -> ChatInviteLink:
        """Revoke an invite link created by the bot."""
        return self._call("revokeChatInviteLink", params, ChatInviteLink)

    def approve_chat_join_request(self, params: ApproveChatJoinRequestParams) -> None:
        """Approve a chat join request."""
        self._call("approveChatJoinRequest", params)

    def decline_chat_join_request(self, params: DeclineChatJoinRequestParams) -> None:
        """Decline a chat join request."""
        self._call("declineChatJoinRequest", params)

    def set_chat_photo(self, params: SetChatPhotoParams) -> None:
        """Set a new profile photo for the chat."""
        self._call("setChatPhoto", params, files=[params.photo])

    def delete_chat_photo(self, params: DeleteChatPhotoParams) -> None:
        """Delete a chat photo."""
        self._call("deleteChatPhoto", params)

    def set_chat_title(self, params: SetChatTitleParams) -> None:
        """Change the title of a chat."""
        self._call("setChatTitle", params)

    def set_chat_description(self, params: SetChatDescriptionParams) -> None:
        """Change the description of a group, a supergroup or a channel."""
        self._call("setChatDescription", params)

    def pin_chat_message(self, params: PinChatMessageParams) -> None:
        """Add a message to the list of pinned messages in a chat."""
        self._call("pinChatMessage", params)

    def unpin_chat_message(self, params: UnpinChatMessageParams) -> None:
        """Remove a message from the list of pinned messages in a chat."""
        self._call("unpinChatMessage", params)

    def unpin_all_chat_messages(self, params: UnpinAllChatMessagesParams) -> None:
        """Clear the list of pinned messages in a chat."""
        self._call("unpinAllChatMessages", params)

    def leave_chat(self, params: LeaveChatParams) -> None:
        """Leave a group, supergroup or channel."""
        self._call("leaveChat", params)

    def get_chat(self, params: GetChatParams) -> Chat:
        """Get up to date information about a chat."""
        return self._call("getChat", params, Chat)

    def get_chat_administrators(self, params: GetChatAdministratorsParams) -> List[ChatMember]:
        """Get the administrators of a chat, excluding other bots."""
        return self._call("getChatAdministrators", params, List[ChatMember])

    def get_chat_member_count(self, params: GetChatMemberCountParams) -> int:
        """Get the number of members in a chat."""
        return self._call("getChatMemberCount", params, int)

    def get_chat_member(self, params: GetChatMemberParams) -> ChatMember:
        """Get information about a member of a chat."""
        return self._call("getChatMember", params, ChatMember)

    def set_chat_sticker_set(self, params: SetChatStickerSetParams) -> None:
        """Set a new group sticker set for a supergroup."""
        self._call("setChatStickerSet", params)

    def delete_chat_sticker_set(self, params: DeleteChatStickerSetParams) -> None:
        """Delete a group sticker set from a supergroup."""
        self._call("deleteChatStickerSet", params)

    def answer_callback_query(self, params: AnswerCallbackQueryParams) -> None:
        """Answer a callback query sent from an inline keyboard."""
        self._call("answerCallbackQuery", params)

    def set_my_commands(self, params: SetMyCommandsParams) -> None:
        """Change the list of the bot's commands."""
        self._call("setMyCommands", params)

    def delete_my_commands(self, params: Optional[DeleteMyCommandsParams] = None) -> None:
        """Delete the list of the bot's commands for the given scope and language."""
        self._call("deleteMyCommands", params)

    def get_my_commands(self, params: Optional[GetMyCommandsParams] = None) -> List[BotCommand]:
        """Get the current list of the bot's commands."""
        return self._call("getMyCommands", params, List[BotCommand])

    def set_chat_menu_button(self, params: Optional[SetChatMenuButtonParams] = None) -> None:
        """Change the bot's menu button in a private chat, or the default one."""
        self._call("setChatMenuButton", params)

    def get_chat_menu_button(self, params: Optional[GetChatMenuButtonParams] = None) -> MenuButton:
        """Get the current value of the bot's menu button."""
        return self._call("getChatMenuButton", params, MenuButton)

    def set_my_default_administrator_rights(
        self, params: Optional[SetMyDefaultAdministratorRightsParams] = None
    ) -> None:
        """Change the default administrator rights requested when the bot is added to a chat."""
        self._call("setMyDefaultAdministratorRights", params)

    def get_my_default_administrator_rights(
        self, params: Optional[GetMyDefaultAdministratorRightsParams] = None
    ) -> ChatAdministratorRights:
        """Get the current default administrator rights of the bot."""
        return self._call("getMyDefaultAdministratorRights", params, ChatAdministratorRights)

    # ------------------------------------------------------------------
    # Updating messages
    # ------------------------------------------------------------------

    def edit_message_text(self, params: EditMessageTextParams) -> MessageOrTrue:
        """Edit text and game messages."""
        return self._call("editMessageText", params, MessageOrTrue)

    def edit_message_caption(self, params: EditMessageCaptionParams) -> MessageOrTrue:
        """Edit captions of messages."""
        return self._call("editMessageCaption", params, MessageOrTrue)

    def edit_message_media(self, params: EditMessageMediaParams) -> MessageOrTrue:
        """Edit animation, audio, document, photo, or video messages."""
        return self._call(
            "editMessageMedia", params, MessageOrTrue, [params.media.media, params.media.thumb]
        )

    def edit_message_reply_markup(self, params: EditMessageReplyMarkupParams) -> MessageOrTrue:
        """Edit only the reply markup of messages."""
        return self._call("editMessageReplyMarkup", params, MessageOrTrue)

    def stop_poll(self, params: StopPollParams) -> Poll:
        """Stop a poll which was sent by the bot."""
        return self._call("stopPoll", params, Poll)

    def delete_message(self, params: DeleteMessageParams) -> None:
        """Delete a message."""
        self._call("deleteMessage", params)

    # ------------------------------------------------------------------
    # Stickers
    # ------------------------------------------------------------------

    def send_sticker(self, params: SendStickerParams) -> Message:
        """Send a static .WEBP, animated .TGS, or video .WEBM sticker."""
        return self._call("sendSticker", params, Message, [params.sticker])

    def get_sticker_set(self, params: GetStickerSetParams) -> StickerSet:
        """Get a sticker set."""
        return self._call("getStickerSet", params, StickerSet)

    def upload_sticker_file(self, params: UploadStickerFileParams) -> File:
        """Upload a .PNG file for later use in sticker set methods."""
        return self._call("uploadStickerFile", params, File, [params.png_sticker])

    def create_new_sticker_set(self, params: CreateNewStickerSetParams) -> None:
        """Create a new sticker set owned by a user."""
        self._call(
            "createNewStickerSet",
            params,
            files=[params.png_sticker, params.tgs_sticker, params.webm_sticker],
        )

    def add_sticker_to_set(self, params: AddStickerToSetParams) -> None:
        """Add a new sticker to a set created by the bot."""
        self._call(
            "addStickerToSet",
            params,
            files=[params.png_sticker, params.tgs_sticker, params.webm_sticker],
        )

    def set_sticker_position_in_set(self, params: SetStickerPositionInSetParams) -> None:
        """Move a sticker in a set created by the bot to a specific position."""
        self._call("setStickerPositionInSet", params)

    def delete_sticker_from_set(self, params: DeleteStickerFromSetParams) -> None:
        """Delete a sticker from a set created by the bot."""
        self._call("deleteStickerFromSet", params)

    def set_sticker_set_thumb(self, params: SetStickerSetThumbParams) -> None:
        """Set the thumbnail of a sticker set."""
        self._call("setStickerSetThumb", params, files=[params.thumb])

    # ------------------------------------------------------------------
    # Inline mode
    # ------------------------------------------------------------------

    def answer_inline_query(self, params: AnswerInlineQueryParams) -> None:
        """Send answers to an inline query."""
        self._call("answerInlineQuery", params)

    def answer_web_app_query(self, params: AnswerWebAppQueryParams) -> SentWebAppMessage:
        """Set the result of an interaction with a Web App."""
        return self._call("answerWebAppQuery", params, SentWebAppMessage)

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    def send_invoice(self, params: SendInvoiceParams) -> Message:
        """Send an invoice."""
        return self._call("sendInvoice", params, Message)

    def create_invoice_link(self, params: CreateInvoiceLinkParams) -> str:
        """Create a link for an invoice."""
        return self._call("createInvoiceLink", params, str)

    def answer_shipping_query(self, params: AnswerShippingQueryParams) -> None:
        """Reply to a shipping query."""
        self._call("answerShippingQuery", params)

    def answer_pre_checkout_query(self, params: AnswerPreCheckoutQueryParams) -> None:
        """Respond to a pre-checkout query."""
        self._call("answerPreCheckoutQuery", params)

    # ------------------------------------------------------------------
    # Telegram Passport
    # ------------------------------------------------------------------

    def set_passport_data_errors(self, params: SetPassportDataErrorsParams) -> None:
        """Inform a user that some Telegram Passport elements contain errors."""
        self._call("setPassportDataErrors", params)

    # ------------------------------------------------------------------
    # Games
    # ------------------------------------------------------------------

    def send_game(self, params: SendGameParams) -> Message:
        """Send a game."""
        return self._call("sendGame", params, Message)

    def set_game_score(self, params: SetGameScoreParams) -> MessageOrTrue:
        """Set the score of a user in a game.

        Returns the edited message, or ``True`` for inline messages.
        """
        return self._call("setGameScore", params, MessageOrTrue)

    def get_game_high_scores(self, params: GetGameHighScoresParams) -> List[GameHighScore]:
        """Get data for high score tables."""
        return self._call("getGameHighScores", params, List[GameHighScore])


def new_api(token: str, **kwargs: Any) -> tuple[API, User]:
    """Create an :class:`API` and validate *token* with getMe.

    Keyword arguments are passed to :class:`API`.

    Returns:
        The client and the bot's own :class:`~telegrambot.models.User`.
    """
    api = API(token, **kwargs)
    me = api.get_me()
    logger.info("Bot API client ready", extra={"bot_id": me.id, "bot_username": me.username})
    return api, me
