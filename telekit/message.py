"""Messages, their entities and service payloads (video chats, forum topics)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from telekit.markup import ReplyMarkup, WebAppData
from telekit.media import (
    Animation,
    Audio,
    Contact,
    Dice,
    Document,
    Location,
    Photo,
    Sticker,
    Venue,
    Video,
    VideoNote,
    Voice,
)
from telekit.payments import Invoice, Payment
from telekit.poll import Poll

_CHAT_PRIVATE = "private"
_CHAT_GROUP = "group"
_CHAT_SUPER_GROUP = "supergroup"
_CHAT_CHANNEL = "channel"


def _value(item: Any) -> Any:
    return getattr(item, "value", item)


def _encode(item: Any) -> Any:
    to_dict = getattr(item, "to_dict", None)
    return to_dict() if callable(to_dict) else item


class EntityType(str, Enum):
    """Kind of a message entity."""

    MENTION = "mention"
    TEXT_MENTION = "text_mention"
    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    COMMAND = "bot_command"
    URL = "url"
    EMAIL = "email"
    PHONE = "phone_number"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    CODE_BLOCK = "pre"
    TEXT_LINK = "text_link"
    SPOILER = "spoiler"
    CUSTOM_EMOJI = "custom_emoji"


@dataclass
class MessageEntity:
    """A special part of a text: mention, hashtag, URL and the like.

    Offset and length are counted in UTF-16 code units.
    """

    type: EntityType | str = EntityType.MENTION
    offset: int = 0
    length: int = 0
    url: str = ""
    user: Any = None
    language: str = ""
    custom_emoji: str = ""

    def to_dict(self) -> dict:
        result: dict = {
            "type": str(_value(self.type)),
            "offset": self.offset,
            "length": self.length,
        }
        if self.url:
            result["url"] = self.url
        if self.user is not None:
            result["user"] = _encode(self.user)
        if self.language:
            result["language"] = self.language
        result["custom_emoji_id"] = self.custom_emoji
        return result


@dataclass
class ProximityAlert:
    """A user in the chat triggered a proximity alert set by another user."""

    traveler: Any = None
    watcher: Any = None
    distance: int = 0


@dataclass
class AutoDeleteTimer:
    """A change in the auto-delete timer settings."""

    unixtime: int = 0


@dataclass
class VideoChatStarted:
    """A video chat was started in the chat."""


@dataclass
class VideoChatEnded:
    """A video chat ended in the chat; duration is in seconds."""

    duration: int = 0


@dataclass
class VideoChatParticipants:
    """New members were invited to a video chat."""

    users: list[Any] = field(default_factory=list)


@dataclass
class VideoChatScheduled:
    """A video chat was scheduled in the chat."""

    unixtime: int = 0

    def starts_at(self) -> datetime:
        """Moment the video chat is supposed to start, in local time."""
        return datetime.fromtimestamp(self.unixtime)


@dataclass
class Topic:
    """A forum topic."""

    name: str = ""
    icon_color: int = 0
    icon_custom_emoji_id: str = ""
    thread_id: int = 0


@dataclass
class TopicCreated(Topic):
    """Service payload: a forum topic was created."""


@dataclass
class TopicClosed:
    """Service payload: a forum topic was closed."""


@dataclass
class TopicReopened(Topic):
    """Service payload: a forum topic was reopened."""


@dataclass
class TopicDeleted(Topic):
    """Service payload: a forum topic was deleted."""


@dataclass
class Message:
    """A message."""

    id: int = 0
    thread_id: int = 0
    sender: Any = None
    unixtime: int = 0
    chat: Any = None
    sender_chat: Any = None
    original_sender: Any = None
    original_chat: Any = None
    original_message_id: int = 0
    original_signature: str = ""
    original_sender_name: str = ""
    original_unixtime: int = 0
    automatic_forward: bool = False
    reply_to: Message | None = None
    via: Any = None
    last_edit: int = 0
    is_topic_message: bool = False
    protected: bool = False
    album_id: str = ""
    signature: str = ""
    text: str = ""
    payload: str = ""
    entities: list[MessageEntity] = field(default_factory=list)
    caption: str = ""
    caption_entities: list[MessageEntity] = field(default_factory=list)
    audio: Audio | None = None
    document: Document | None = None
    photo: Photo | None = None
    sticker: Sticker | None = None
    voice: Voice | None = None
    video_note: VideoNote | None = None
    video: Video | None = None
    animation: Animation | None = None
    contact: Contact | None = None
    location: Location | None = None
    venue: Venue | None = None
    poll: Poll | None = None
    game: Any = None
    dice: Dice | None = None
    user_joined: Any = None
    user_left: Any = None
    new_group_title: str = ""
    new_group_photo: Photo | None = None
    users_joined: list[Any] = field(default_factory=list)
    group_photo_deleted: bool = False
    group_created: bool = False
    super_group_created: bool = False
    channel_created: bool = False
    migrate_to: int = 0
    migrate_from: int = 0
    pinned_message: Message | None = None
    invoice: Invoice | None = None
    payment: Payment | None = None
    connected_website: str = ""
    video_chat_started: VideoChatStarted | None = None
    video_chat_ended: VideoChatEnded | None = None
    video_chat_participants: VideoChatParticipants | None = None
    video_chat_scheduled: VideoChatScheduled | None = None
    web_app_data: WebAppData | None = None
    proximity_alert: ProximityAlert | None = None
    auto_delete_timer: AutoDeleteTimer | None = None
    reply_markup: ReplyMarkup | None = None
    topic_created: TopicCreated | None = None
    topic_closed: TopicClosed | None = None
    topic_reopened: TopicReopened | None = None

    def message_sig(self) -> tuple[str, int]:
        """Message identifier and chat identifier, as used for editing."""
        return str(self.id), self.chat.id

    def time(self) -> datetime:
        """Moment of message creation in local time."""
        return datetime.fromtimestamp(self.unixtime)

    def last_edited(self) -> datetime:
        return datetime.fromtimestamp(self.last_edit)

    def is_forwarded(self) -> bool:
        return self.original_sender is not None or self.original_chat is not None

    def is_reply(self) -> bool:
        return self.reply_to is not None

    def _chat_type(self) -> Any:
        return _value(self.chat.type)

    def private(self) -> bool:
        return self._chat_type() == _CHAT_PRIVATE

    def from_group(self) -> bool:
        """True for both groups and supergroups."""
        return self._chat_type() in (_CHAT_GROUP, _CHAT_SUPER_GROUP)

    def from_channel(self) -> bool:
        return self._chat_type() == _CHAT_CHANNEL

    def is_service(self) -> bool:
        """True for automatically sent messages about chat-wide actions."""
        return (
            self.user_joined is not None
            or bool(self.users_joined)
            or self.user_left is not None
            or bool(self.new_group_title)
            or self.new_group_photo is not None
            or self.group_photo_deleted
            or self.group_created
            or self.super_group_created
            or self.migrate_to != self.migrate_from
        )

    def entity_text(self, entity: MessageEntity) -> str:
        """Substring of the text (or caption) covered by the entity.

        Offsets are counted in UTF-16 code units; an out-of-range entity
        gives an empty string.
        """
        text = self.text or self.caption
        encoded = text.encode("utf-16-le", errors="surrogatepass")
        units = len(encoded) // 2
        start, end = entity.offset, entity.offset + entity.length
        if start < 0 or end > units:
            return ""
        if end < start:
            raise ValueError("entity length is negative")
        return encoded[start * 2:end * 2].decode("utf-16-le", errors="replace")

    def media(self) -> Any:
        """The message's media, if any, checked in a fixed order."""
        for item in (
            self.photo,
            self.voice,
            self.audio,
            self.animation,
            self.sticker,
            self.document,
            self.video,
            self.video_note,
        ):
            if item is not None:
                return item
        return None