"""Parameter models for every Bot API method.

One ``<Method>Params`` class per method.  Optional fields left as ``None``
are omitted from the request.  Fields typed :data:`telegrambot.files.InputFile`
accept a :class:`~telegrambot.files.FileID`, :class:`~telegrambot.files.FileURL`
or :class:`~telegrambot.files.FileReader`.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel

from telegrambot.enums import (
    ChatAction,
    DiceEmoji,
    ParseMode,
    PollType,
    UpdateType,
)
from telegrambot.files import InputFile
from telegrambot.models import (
    BotCommand,
    BotCommandScope,
    ChatAdministratorRights,
    ChatPermissions,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InputMedia,
    LabeledPrice,
    MaskPosition,
    MenuButton,
    MessageEntity,
    PassportElementError,
    ReplyMarkup,
    ShippingOption,
)

ChatIDOrUsername = Union[int, str]


class Params(BaseModel):
    """Base class of all method parameter models."""

    model_config = {"populate_by_name": True, "validate_assignment": True}


class _SendOptions(Params):
    """Delivery options shared by the ``send*`` methods."""

    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None


class _EditTarget(Params):
    """Either ``chat_id`` + ``message_id`` or ``inline_message_id``."""

    chat_id: Optional[ChatIDOrUsername] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None


# ── Getting updates ──────────────────────────────────────────────────────────


class GetUpdatesParams(Params):
    offset: Optional[int] = None
    limit: Optional[int] = None
    timeout: Optional[int] = None
    allowed_updates: Optional[List[UpdateType]] = None


class SetWebhookParams(Params):
    url: str
    certificate: Optional[InputFile] = None
    ip_address: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[UpdateType]] = None
    drop_pending_updates: Optional[bool] = None
    secret_token: Optional[str] = None


class DeleteWebhookParams(Params):
    drop_pending_updates: Optional[bool] = None


# ── Sending messages ─────────────────────────────────────────────────────────


class SendMessageParams(_SendOptions):
    chat_id: ChatIDOrUsername
    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class ForwardMessageParams(Params):
    chat_id: ChatIDOrUsername
    from_chat_id: ChatIDOrUsername
    message_id: int
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None


class CopyMessageParams(_SendOptions):
    chat_id: ChatIDOrUsername
    from_chat_id: ChatIDOrUsername
    message_id: int
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendPhotoParams(_SendOptions):
    chat_id: ChatIDOrUsername
    photo: InputFile
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendAudioParams(_SendOptions):
    chat_id: ChatIDOrUsername
    audio: InputFile
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None
    thumb: Optional[InputFile] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendDocumentParams(_SendOptions):
    chat_id: ChatIDOrUsername
    document: InputFile
    thumb: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_content_type_detection: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVideoParams(_SendOptions):
    chat_id: ChatIDOrUsername
    video: InputFile
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    supports_streaming: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendAnimationParams(_SendOptions):
    chat_id: ChatIDOrUsername
    animation: InputFile
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[InputFile] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVoiceParams(_SendOptions):
    chat_id: ChatIDOrUsername
    voice: InputFile
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVideoNoteParams(_SendOptions):
    chat_id: ChatIDOrUsername
    video_note: InputFile
    duration: Optional[int] = None
    length: Optional[int] = None
    thumb: Optional[InputFile] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendMediaGroupParams(_SendOptions):
    chat_id: ChatIDOrUsername
    media: List[InputMedia]


class SendLocationParams(_SendOptions):
    chat_id: ChatIDOrUsername
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class EditMessageLiveLocationParams(_EditTarget):
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class StopMessageLiveLocationParams(_EditTarget):
    reply_markup: Optional[InlineKeyboardMarkup] = None


class SendVenueParams(_SendOptions):
    chat_id: ChatIDOrUsername
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendContactParams(_SendOptions):
    chat_id: ChatIDOrUsername
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendPollParams(_SendOptions):
    chat_id: ChatIDOrUsername
    question: str
    options: List[str]
    is_anonymous: Optional[bool] = None
    type: Optional[PollType] = None
    allows_multiple_answers: Optional[bool] = None
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_parse_mode: Optional[ParseMode] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None
    is_closed: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendDiceParams(_SendOptions):
    chat_id: ChatIDOrUsername
    emoji: Optional[DiceEmoji] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendChatActionParams(Params):
    chat_id: ChatIDOrUsername
    action: ChatAction


# ── Users, files & chat administration ───────────────────────────────────────


class GetUserProfilePhotosParams(Params):
    user_id: int
    offset: Optional[int] = None
    limit: Optional[int] = None


class GetFileParams(Params):
    file_id: str


class BanChatMemberParams(Params):
    chat_id: ChatIDOrUsername
    user_id: int
    until_date: Optional[int] = None
    revoke_messages: Optional[bool] = None


class UnbanChatMemberParams(Params):
    chat_id: ChatIDOrUsername
    user_id: int
    only_if_banned: Optional[bool] = None


class RestrictChatMemberParams(Params):
    chat_id: ChatIDOrUsername
    user_id: int
    permissions: ChatPermissions
    until_date: Optional[int] = None


class PromoteChatMemberParams(Params):
    chat_id: ChatIDOrUsername
    user_id: int
    is_anonymous: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_video_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class SetChatAdministratorCustomTitleParams(Params):
    chat_id: ChatIDOrUsername
    user_id: int
    custom_title: str


class BanChatSenderChatParams(Params):
    chat_id: ChatIDOrUsername
    sender_chat_id: int


class UnbanChatSenderChatParams(Params):
    chat_id: ChatIDOrUsername
    sender_chat_id: int


class SetChatPermissionsParams(Params):
    chat_id: ChatIDOrUsername
    permissions: ChatPermissions


class ChatParams(Params):
    """Parameters of the methods that only take a ``chat_id``."""

    chat_id: ChatIDOrUsername


class ExportChatInviteLinkParams(ChatParams):
    pass


class CreateChatInviteLinkParams(Params):
    chat_id: ChatIDOrUsername
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    creates_join_request: Optional[bool] = None


class EditChatInviteLinkParams(Params):
    chat_id: ChatIDOrUsername
    invite_link: str
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    creates_join_request: Optional[bool] = None


class RevokeChatInviteLinkParams(Params):
    chat_id: ChatIDOrUsername
    invite_link: str


class ApproveChatJoinRequestParams(Params):
    chat_id: ChatIDOrUsername
    user_id: int


class DeclineChatJoinRequestParams(Params):
    chat_id: ChatIDOrUsername
    user_id: int


class SetChatPhotoParams(Params):
    chat_id: ChatIDOrUsername
    photo: InputFile


class DeleteChatPhotoParams(ChatParams):
    pass


class SetChatTitleParams(Params):
    chat_id: ChatIDOrUsername
    title: str


class SetChatDescriptionParams(Params):
    chat_id: ChatIDOrUsername
    description: Optional[str] = None


class PinChatMessageParams(Params):
    chat_id: ChatIDOrUsername
    message_id: int
    disable_notification: Optional[bool] = None


class UnpinChatMessageParams(Params):
    chat_id: ChatIDOrUsername
    message_id: Optional[int] = None


class UnpinAllChatMessagesParams(ChatParams):
    pass


class LeaveChatParams(ChatParams):
    pass


class GetChatParams(ChatParams):
    pass


class GetChatAdministratorsParams(ChatParams):
    pass


class GetChatMemberCountParams(ChatParams):
    pass


class GetChatMemberParams(Params):
    chat_id: ChatIDOrUsername
    user_id: int


class SetChatStickerSetParams(Params):
    chat_id: ChatIDOrUsername
    sticker_set_name: str


class DeleteChatStickerSetParams(ChatParams):
    pass


class AnswerCallbackQueryParams(Params):
    callback_query_id: str
    text: Optional[str] = None
    show_alert: Optional[bool] = None
    url: Optional[str] = None
    cache_time: Optional[int] = None


# ── Bot settings ─────────────────────────────────────────────────────────────


class SetMyCommandsParams(Params):
    commands: List[BotCommand]
    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None


class DeleteMyCommandsParams(Params):
    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None


class GetMyCommandsParams(Params):
    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None


class SetChatMenuButtonParams(Params):
    chat_id: Optional[int] = None
    menu_button: Optional[MenuButton] = None


class GetChatMenuButtonParams(Params):
    chat_id: Optional[int] = None


class SetMyDefaultAdministratorRightsParams(Params):
    rights: Optional[ChatAdministratorRights] = None
    for_channels: Optional[bool] = None


class GetMyDefaultAdministratorRightsParams(Params):
    for_channels: Optional[bool] = None


# ── Updating messages ────────────────────────────────────────────────────────


class EditMessageTextParams(_EditTarget):
    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageCaptionParams(_EditTarget):
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageMediaParams(_EditTarget):
    media: InputMedia
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageReplyMarkupParams(_EditTarget):
    reply_markup: Optional[InlineKeyboardMarkup] = None


class StopPollParams(Params):
    chat_id: ChatIDOrUsername
    message_id: int
    reply_markup: Optional[InlineKeyboardMarkup] = None


class DeleteMessageParams(Params):
    chat_id: ChatIDOrUsername
    message_id: int


# ── Stickers ─────────────────────────────────────────────────────────────────


class SendStickerParams(_SendOptions):
    chat_id: ChatIDOrUsername
    sticker: InputFile
    reply_markup: Optional[ReplyMarkup] = None


class GetStickerSetParams(Params):
    name: str


class UploadStickerFileParams(Params):
    user_id: int
    png_sticker: InputFile


class CreateNewStickerSetParams(Params):
    user_id: int
    name: str
    title: str
    png_sticker: Optional[InputFile] = None
    tgs_sticker: Optional[InputFile] = None
    webm_sticker: Optional[InputFile] = None
    emojis: str
    contains_masks: Optional[bool] = None
    mask_position: Optional[MaskPosition] = None


class AddStickerToSetParams(Params):
    user_id: int
    name: str
    png_sticker: Optional[InputFile] = None
    tgs_sticker: Optional[InputFile] = None
    webm_sticker: Optional[InputFile] = None
    emojis: str
    mask_position: Optional[MaskPosition] = None


class SetStickerPositionInSetParams(Params):
    sticker: str
    position: int


class DeleteStickerFromSetParams(Params):
    sticker: str


class SetStickerSetThumbParams(Params):
    name: str
    user_id: int
    thumb: Optional[InputFile] = None


# ── Inline mode ──────────────────────────────────────────────────────────────


class AnswerInlineQueryParams(Params):
    inline_query_id: str
    results: List[InlineQueryResult]
    cache_time: Optional[int] = None
    is_personal: Optional[bool] = None
    next_offset: Optional[str] = None
    switch_pm_text: Optional[str] = None
    switch_pm_parameter: Optional[str] = None


class AnswerWebAppQueryParams(Params):
    web_app_query_id: str
    result: InlineQueryResult


# ── Payments ─────────────────────────────────────────────────────────────────


class _InvoiceFields(Params):
    title: str
    description: str
    payload: str
    provider_token: str
    currency: str
    prices: List[LabeledPrice]
    max_tip_amount: Optional[int] = None
    suggested_tip_amounts: Optional[List[int]] = None
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None


class SendInvoiceParams(_SendOptions, _InvoiceFields):
    chat_id: ChatIDOrUsername
    start_parameter: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class CreateInvoiceLinkParams(_InvoiceFields):
    pass


class AnswerShippingQueryParams(Params):
    shipping_query_id: str
    ok: bool
    shipping_options: Optional[List[ShippingOption]] = None
    error_message: Optional[str] = None


class AnswerPreCheckoutQueryParams(Params):
    pre_checkout_query_id: str
    ok: bool
    error_message: Optional[str] = None


# ── Telegram Passport ────────────────────────────────────────────────────────


class SetPassportDataErrorsParams(Params):
    user_id: int
    errors: List[PassportElementError]


# ── Games ────────────────────────────────────────────────────────────────────


class SendGameParams(_SendOptions):
    chat_id: int
    game_short_name: str
    reply_markup: Optional[InlineKeyboardMarkup] = None


class SetGameScoreParams(Params):
    user_id: int
    score: int
    force: Optional[bool] = None
    disable_edit_message: Optional[bool] = None
    chat_id: Optional[int] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None


class GetGameHighScoresParams(Params):
    user_id: int
    chat_id: Optional[int] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
