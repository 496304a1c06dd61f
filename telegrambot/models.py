"""Pydantic models for the objects exchanged with the Telegram Bot API.

Field names match the Bot API reference exactly; the only renamed field is
``from`` (a Python keyword), exposed as ``from_user`` and serialised back under
its wire name.  Unknown fields sent by newer API versions are ignored.

Several Bot API "variant" families (chat members, inline query results, input
media, ...) are modelled as a single class holding the union of all variant
fields, discriminated by ``type``/``status``.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

from telegrambot.files import InputFile


class TelegramObject(BaseModel):
    """Base class shared by every Bot API object.

    Fields are read by their wire names only, so ``from`` populates
    ``from_user`` while a ``from_user`` key is ignored.
    """

    model_config = {"populate_by_name": False}


# ── Users & chats ────────────────────────────────────────────────────────────


class User(TelegramObject):
    """A Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    is_premium: Optional[bool] = None
    added_to_attachment_menu: Optional[bool] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None


class ChatPhoto(TelegramObject):
    """A chat photo."""

    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatPermissions(TelegramObject):
    """Actions a non-administrator user is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class Location(TelegramObject):
    """A point on the map."""

    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class ChatLocation(TelegramObject):
    """A location to which a chat is connected."""

    location: Location
    address: str


class Chat(TelegramObject):
    """A chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    photo: Optional[ChatPhoto] = None
    bio: Optional[str] = None
    has_private_forwards: Optional[bool] = None
    join_to_send_messages: Optional[bool] = None
    join_by_request: Optional[bool] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional["Message"] = None
    permissions: Optional[ChatPermissions] = None
    slow_mode_delay: Optional[int] = None
    message_auto_delete_time: Optional[int] = None
    has_protected_content: Optional[bool] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    linked_chat_id: Optional[int] = None
    location: Optional[ChatLocation] = None


class ChatInviteLink(TelegramObject):
    """An invite link for a chat."""

    invite_link: str
    creator: User
    creates_join_request: bool
    is_primary: bool
    is_revoked: bool
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    pending_join_request_count: Optional[int] = None


class ChatAdministratorRights(TelegramObject):
    """Rights of an administrator in a chat."""

    is_anonymous: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_video_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class ChatMember(TelegramObject):
    """Information about one member of a chat; the populated fields depend on ``status``."""

    status: str
    user: User
    is_anonymous: Optional[bool] = None
    custom_title: Optional[str] = None
    can_be_edited: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_video_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    is_member: Optional[bool] = None
    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    until_date: Optional[int] = None


class ChatMemberUpdated(TelegramObject):
    """Changes in the status of a chat member."""

    chat: Chat
    from_user: User = Field(..., alias="from")
    date: int
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: Optional[ChatInviteLink] = None


class ChatJoinRequest(TelegramObject):
    """A join request sent to a chat."""

    chat: Chat
    from_user: User = Field(..., alias="from")
    date: int
    bio: Optional[str] = None
    invite_link: Optional[ChatInviteLink] = None


# ── Message content ──────────────────────────────────────────────────────────


class MessageEntity(TelegramObject):
    """One special entity in a text message (hashtag, URL, bot command, ...)."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None


class MessageIDObject(TelegramObject):
    """A message identifier, as returned by copyMessage."""

    message_id: int


class PhotoSize(TelegramObject):
    """One size of a photo or a file/sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(TelegramObject):
    """An animation file (GIF or H.264/MPEG-4 AVC video without sound)."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramObject):
    """An audio file to be treated as music."""

    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional[PhotoSize] = None


class Document(TelegramObject):
    """A general file."""

    file_id: str
    file_unique_id: str
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(TelegramObject):
    """A video file."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(TelegramObject):
    """A video message."""

    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_size: Optional[int] = None


class Voice(TelegramObject):
    """A voice note."""

    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Contact(TelegramObject):
    """A phone contact."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None


class Dice(TelegramObject):
    """An animated emoji that displays a random value."""

    emoji: str
    value: int


class PollOption(TelegramObject):
    text: str
    voter_count: int


class PollAnswer(TelegramObject):
    """An answer of a user in a non-anonymous poll."""

    poll_id: str
    user: User
    option_ids: List[int]


class Poll(TelegramObject):
    """A poll."""

    id: str
    question: str
    options: List[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None


class Venue(TelegramObject):
    """A venue."""

    location: Location
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class WebAppData(TelegramObject):
    """Data sent from a Web App to the bot."""

    data: str
    button_text: str


class ProximityAlertTriggered(TelegramObject):
    traveler: User
    watcher: User
    distance: int


class MessageAutoDeleteTimerChanged(TelegramObject):
    message_auto_delete_time: int


class VideoChatScheduled(TelegramObject):
    start_date: int


class VideoChatStarted(TelegramObject):
    pass


class VideoChatEnded(TelegramObject):
    duration: int


class VideoChatParticipantsInvited(TelegramObject):
    users: Optional[List[User]] = None


class UserProfilePhotos(TelegramObject):
    """A user's profile pictures, each in up to four sizes."""

    total_count: int
    photos: List[List[PhotoSize]]


class File(TelegramObject):
    """A file ready to be downloaded from ``<file endpoint><token>/<file_path>``."""

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None


# ── Keyboards & buttons ──────────────────────────────────────────────────────


class WebAppInfo(TelegramObject):
    url: str


class KeyboardButtonPollType(TelegramObject):
    type: Optional[str] = None


class KeyboardButton(TelegramObject):
    """One button of a reply keyboard."""

    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional[KeyboardButtonPollType] = None
    web_app: Optional[WebAppInfo] = None


class ReplyKeyboardMarkup(TelegramObject):
    """A custom keyboard with reply options."""

    keyboard: List[List[KeyboardButton]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


class ReplyKeyboardRemove(TelegramObject):
    """Removes the current custom keyboard."""

    remove_keyboard: bool = True
    selective: Optional[bool] = None


class LoginURL(TelegramObject):
    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


class CallbackGame(TelegramObject):
    """Placeholder, holds no information."""


class InlineKeyboardButton(TelegramObject):
    """One button of an inline keyboard; exactly one optional field must be used."""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    web_app: Optional[WebAppInfo] = None
    login_url: Optional[LoginURL] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional[CallbackGame] = None
    pay: Optional[bool] = None


class InlineKeyboardMarkup(TelegramObject):
    """An inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List[InlineKeyboardButton]]


class ForceReply(TelegramObject):
    """Asks the client to display a reply interface."""

    force_reply: bool = True
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]


class CallbackQuery(TelegramObject):
    """An incoming callback query from an inline keyboard button."""

    id: str
    from_user: User = Field(..., alias="from")
    message: Optional["Message"] = None
    inline_message_id: Optional[str] = None
    chat_instance: str
    data: Optional[str] = None
    game_short_name: Optional[str] = None


# ── Bot settings ─────────────────────────────────────────────────────────────


class BotCommand(TelegramObject):
    command: str
    description: str


class BotCommandScope(TelegramObject):
    """Scope to which bot commands are applied; ``chat_id``/``user_id`` depend on ``type``."""

    type: str
    chat_id: Optional[Union[int, str]] = None
    user_id: Optional[int] = None


class MenuButton(TelegramObject):
    """The bot's menu button in a private chat."""

    type: str
    text: Optional[str] = None
    web_app: Optional[WebAppInfo] = None


class ResponseParameters(TelegramObject):
    """Why a request was unsuccessful and how it may be retried."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


class InputMedia(TelegramObject):
    """Content of a media message to be sent; the valid fields depend on ``type``."""

    type: str
    media: InputFile
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    thumb: Optional[InputFile] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None
    performer: Optional[str] = None
    title: Optional[str] = None
    disable_content_type_detection: Optional[bool] = None


# ── Stickers ─────────────────────────────────────────────────────────────────


class MaskPosition(TelegramObject):
    """Position on faces where a mask should be placed by default."""

    point: str
    x_shift: float
    y_shift: float
    scale: float


class Sticker(TelegramObject):
    """A sticker."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    is_animated: bool
    is_video: bool
    thumb: Optional[PhotoSize] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    mask_position: Optional[MaskPosition] = None
    file_size: Optional[int] = None


class StickerSet(TelegramObject):
    """A sticker set."""

    name: str
    title: str
    is_animated: bool
    is_video: bool
    contains_masks: bool
    stickers: List[Sticker]
    thumb: Optional[PhotoSize] = None


# ── Payments ─────────────────────────────────────────────────────────────────


class LabeledPrice(TelegramObject):
    """A portion of the price for goods or services, in the smallest currency unit."""

    label: str
    amount: int


class Invoice(TelegramObject):
    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramObject):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramObject):
    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None


class ShippingOption(TelegramObject):
    id: str
    title: str
    prices: List[LabeledPrice]


class SuccessfulPayment(TelegramObject):
    """Basic information about a successful payment."""

    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None
    telegram_payment_charge_id: str
    provider_payment_charge_id: str


class ShippingQuery(TelegramObject):
    """An incoming shipping query."""

    id: str
    from_user: User = Field(..., alias="from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramObject):
    """An incoming pre-checkout query."""

    id: str
    from_user: User = Field(..., alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None


# ── Telegram Passport ────────────────────────────────────────────────────────


class PassportFile(TelegramObject):
    file_id: str
    file_unique_id: str
    file_size: int
    file_date: int


class EncryptedPassportElement(TelegramObject):
    """Documents or other Telegram Passport elements shared with the bot."""

    type: str
    data: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    files: Optional[List[PassportFile]] = None
    front_side: Optional[PassportFile] = None
    reverse_side: Optional[PassportFile] = None
    selfie: Optional[PassportFile] = None
    translation: Optional[List[PassportFile]] = None
    hash: str


class EncryptedCredentials(TelegramObject):
    data: str
    hash: str
    secret: str


class PassportData(TelegramObject):
    data: List[EncryptedPassportElement]
    credentials: EncryptedCredentials


class PassportElementError(TelegramObject):
    """An error in a Telegram Passport element; the valid fields depend on ``source``."""

    source: str
    type: str
    message: str
    field_name: Optional[str] = None
    data_hash: Optional[str] = None
    file_hash: Optional[str] = None
    file_hashes: Optional[List[str]] = None
    element_hash: Optional[str] = None


# ── Games ────────────────────────────────────────────────────────────────────


class Game(TelegramObject):
    """A game."""

    title: str
    description: str
    photo: List[PhotoSize]
    text: Optional[str] = None
    text_entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None


class GameHighScore(TelegramObject):
    position: int
    user: User
    score: int


# ── Inline mode ──────────────────────────────────────────────────────────────


class InlineQuery(TelegramObject):
    """An incoming inline query."""

    id: str
    from_user: User = Field(..., alias="from")
    query: str
    offset: str
    chat_type: Optional[str] = None
    location: Optional[Location] = None


class InputMessageContent(TelegramObject):
    """Content of a message sent as the result of an inline query.

    Holds the fields of the text, location, venue, contact and invoice variants.
    """

    message_text: Optional[str] = None
    parse_mode: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    title: Optional[str] = None
    address: Optional[str] = None
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    phone_number: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    description: Optional[str] = None
    payload: Optional[str] = None
    provider_token: Optional[str] = None
    currency: Optional[str] = None
    prices: Optional[List[LabeledPrice]] = None
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


class InlineQueryResult(TelegramObject):
    """One result of an inline query; the valid fields depend on ``type``."""

    type: str
    id: str
    title: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    description: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    photo_url: Optional[str] = None
    gif_url: Optional[str] = None
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    thumb_mime_type: Optional[str] = None
    mpeg4_url: Optional[str] = None
    mpeg4_width: Optional[int] = None
    mpeg4_height: Optional[int] = None
    mpeg4_duration: Optional[int] = None
    mime_type: Optional[str] = None
    video_url: Optional[str] = None
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    audio_url: Optional[str] = None
    performer: Optional[str] = None
    audio_duration: Optional[int] = None
    voice_url: Optional[str] = None
    document_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    address: Optional[str] = None
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    phone_number: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    game_short_name: Optional[str] = None
    photo_file_id: Optional[str] = None
    gif_file_id: Optional[str] = None
    mpeg4_file_id: Optional[str] = None
    sticker_file_id: Optional[str] = None
    document_file_id: Optional[str] = None
    video_file_id: Optional[str] = None
    voice_file_id: Optional[str] = None
    audio_file_id: Optional[str] = None


class ChosenInlineResult(TelegramObject):
    """An inline result chosen by a user and sent to their chat partner."""

    result_id: str
    from_user: User = Field(..., alias="from")
    location: Optional[Location] = None
    inline_message_id: Optional[str] = None
    query: str


class SentWebAppMessage(TelegramObject):
    inline_message_id: Optional[str] = None


# ── Messages & updates ───────────────────────────────────────────────────────


class Message(TelegramObject):
    """A message."""

    message_id: int
    from_user: Optional[User] = Field(None, alias="from")
    sender_chat: Optional[Chat] = None
    date: int
    chat: Chat
    forward_from: Optional[User] = None
    forward_from_chat: Optional[Chat] = None
    forward_from_message_id: Optional[int] = None
    forward_signature: Optional[str] = None
    forward_sender_name: Optional[str] = None
    forward_date: Optional[int] = None
    is_automatic_forward: Optional[bool] = None
    reply_to_message: Optional[Message] = None
    via_bot: Optional[User] = None
    edit_date: Optional[int] = None
    has_protected_content: Optional[bool] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None
    audio: Optional[Audio] = None
    document: Optional[Document] = None
    photo: Optional[List[PhotoSize]] = None
    sticker: Optional[Sticker] = None
    video: Optional[Video] = None
    video_note: Optional[VideoNote] = None
    voice: Optional[Voice] = None
    caption: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    contact: Optional[Contact] = None
    dice: Optional[Dice] = None
    game: Optional[Game] = None
    poll: Optional[Poll] = None
    venue: Optional[Venue] = None
    location: Optional[Location] = None
    new_chat_members: Optional[List[User]] = None
    left_chat_member: Optional[User] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List[PhotoSize]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None
    supergroup_chat_created: Optional[bool] = None
    channel_chat_created: Optional[bool] = None
    message_auto_delete_timer_changed: Optional[MessageAutoDeleteTimerChanged] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    pinned_message: Optional[Message] = None
    invoice: Optional[Invoice] = None
    successful_payment: Optional[SuccessfulPayment] = None
    connected_website: Optional[str] = None
    passport_data: Optional[PassportData] = None
    proximity_alert_triggered: Optional[ProximityAlertTriggered] = None
    video_chat_scheduled: Optional[VideoChatScheduled] = None
    video_chat_started: Optional[VideoChatStarted] = None
    video_chat_ended: Optional[VideoChatEnded] = None
    video_chat_participants_invited: Optional[VideoChatParticipantsInvited] = None
    web_app_data: Optional[WebAppData] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


# Payload fields of an Update, in wire order.
UPDATE_PAYLOAD_FIELDS = (
    "message",
    "edited_message",
    "channel_post",
    "edited_channel_post",
    "inline_query",
    "chosen_inline_result",
    "callback_query",
    "shipping_query",
    "pre_checkout_query",
    "poll",
    "poll_answer",
    "my_chat_member",
    "chat_member",
    "chat_join_request",
)


class Update(TelegramObject):
    """An incoming update; at most one of the optional payloads is present."""

    update_id: int
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None
    inline_query: Optional[InlineQuery] = None
    chosen_inline_result: Optional[ChosenInlineResult] = None
    callback_query: Optional[CallbackQuery] = None
    shipping_query: Optional[ShippingQuery] = None
    pre_checkout_query: Optional[PreCheckoutQuery] = None
    poll: Optional[Poll] = None
    poll_answer: Optional[PollAnswer] = None
    my_chat_member: Optional[ChatMemberUpdated] = None
    chat_member: Optional[ChatMemberUpdated] = None
    chat_join_request: Optional[ChatJoinRequest] = None

    @property
    def kind(self) -> Optional[str]:
        """Name of the populated payload field, or ``None`` for an unknown kind."""
        for name in UPDATE_PAYLOAD_FIELDS:
            if getattr(self, name) is not None:
                return name
        return None

    @property
    def payload(self) -> Any:
        """The populated payload object, or ``None``."""
        kind = self.kind
        return getattr(self, kind) if kind else None


class WebhookInfo(TelegramObject):
    """Current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    last_synchronization_error_date: Optional[int] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


# Resolve forward references (Chat -> Message -> Chat, ...) once every class exists.
for _model in list(globals().values()):
    if isinstance(_model, type) and issubclass(_model, TelegramObject):
        _model.model_rebuild()
