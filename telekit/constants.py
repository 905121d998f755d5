"""Shared constants: events, chat actions, parse modes and the base error."""

from __future__ import annotations

from enum import Enum


class TelebotError(Exception):
    """Base error raised by the bot framework."""


ERR_BAD_RECIPIENT = "telekit: recipient is nil"
ERR_UNSUPPORTED_WHAT = "telekit: unsupported what argument"
ERR_COULD_NOT_UPDATE = "telekit: could not fetch new updates"
ERR_TRUE_RESULT = "telekit: result is True"
ERR_BAD_CONTEXT = "telekit: context does not contain message"


class ChatAction(str, Enum):
    """Client-side status indicating bot activity."""

    TYPING = "typing"
    UPLOADING_PHOTO = "upload_photo"
    UPLOADING_VIDEO = "upload_video"
    UPLOADING_AUDIO = "upload_audio"
    UPLOADING_DOCUMENT = "upload_document"
    UPLOADING_VNOTE = "upload_video_note"
    RECORDING_VIDEO = "record_video"
    RECORDING_AUDIO = "record_audio"
    RECORDING_VNOTE = "record_video_note"
    FINDING_LOCATION = "find_location"
    CHOOSING_STICKER = "choose_sticker"


class ParseMode(str, Enum):
    """How client applications render the text of a message."""

    DEFAULT = ""
    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


# Endpoints provided by the framework all start with the "alert" character.
ON_TEXT = "\atext"
ON_EDITED = "\aedited"
ON_PHOTO = "\aphoto"
ON_AUDIO = "\aaudio"
ON_ANIMATION = "\aanimation"
ON_DOCUMENT = "\adocument"
ON_STICKER = "\asticker"
ON_VIDEO = "\avideo"
ON_VOICE = "\avoice"
ON_VIDEO_NOTE = "\avideo_note"
ON_CONTACT = "\acontact"
ON_LOCATION = "\alocation"
ON_VENUE = "\avenue"
ON_DICE = "\adice"
ON_INVOICE = "\ainvoice"
ON_PAYMENT = "\apayment"
ON_GAME = "\agame"
ON_POLL = "\apoll"
ON_POLL_ANSWER = "\apoll_answer"
ON_PINNED = "\apinned"
ON_CHANNEL_POST = "\achannel_post"
ON_EDITED_CHANNEL_POST = "\aedited_channel_post"
ON_TOPIC_CREATED = "\atopic_created"
ON_TOPIC_REOPENED = "\atopic_reopened"
ON_TOPIC_CLOSED = "\atopic_closed"

ON_ADDED_TO_GROUP = "\aadded_to_group"
ON_USER_JOINED = "\auser_joined"
ON_USER_LEFT = "\auser_left"
ON_NEW_GROUP_TITLE = "\anew_chat_title"
ON_NEW_GROUP_PHOTO = "\anew_chat_photo"
ON_GROUP_PHOTO_DELETED = "\achat_photo_deleted"
ON_GROUP_CREATED = "\agroup_created"
ON_SUPER_GROUP_CREATED = "\asupergroup_created"
ON_CHANNEL_CREATED = "\achannel_created"

# Happens when a group switches to a supergroup; its chat ID changes.
ON_MIGRATION = "\amigration"

ON_MEDIA = "\amedia"
ON_CALLBACK = "\acallback"
ON_QUERY = "\aquery"
ON_INLINE_RESULT = "\ainline_result"
ON_SHIPPING = "\ashipping_query"
ON_CHECKOUT = "\apre_checkout_query"
ON_MY_CHAT_MEMBER = "\amy_chat_member"
ON_CHAT_MEMBER = "\achat_member"
ON_CHAT_JOIN_REQUEST = "\achat_join_request"
ON_PROXIMITY_ALERT = "\aproximity_alert_triggered"
ON_AUTO_DELETE_TIMER = "\amessage_auto_delete_timer_changed"
ON_WEB_APP = "\aweb_app"

ON_VIDEO_CHAT_STARTED = "\avideo_chat_started"
ON_VIDEO_CHAT_ENDED = "\avideo_chat_ended"
ON_VIDEO_CHAT_PARTICIPANTS = "\avideo_chat_participants_invited"
ON_VIDEO_CHAT_SCHEDULED = "\avideo_chat_scheduled"

EVENTS = (
    ON_TEXT, ON_EDITED, ON_PHOTO, ON_AUDIO, ON_ANIMATION, ON_DOCUMENT,
    ON_STICKER, ON_VIDEO, ON_VOICE, ON_VIDEO_NOTE, ON_CONTACT, ON_LOCATION,
    ON_VENUE, ON_DICE, ON_INVOICE, ON_PAYMENT, ON_GAME, ON_POLL,
    ON_POLL_ANSWER, ON_PINNED, ON_CHANNEL_POST, ON_EDITED_CHANNEL_POST,
    ON_TOPIC_CREATED, ON_TOPIC_REOPENED, ON_TOPIC_CLOSED,
    ON_ADDED_TO_GROUP, ON_USER_JOINED, ON_USER_LEFT, ON_NEW_GROUP_TITLE,
    ON_NEW_GROUP_PHOTO, ON_GROUP_PHOTO_DELETED, ON_GROUP_CREATED,
    ON_SUPER_GROUP_CREATED, ON_CHANNEL_CREATED, ON_MIGRATION,
    ON_MEDIA, ON_CALLBACK, ON_QUERY, ON_INLINE_RESULT, ON_SHIPPING,
    ON_CHECKOUT, ON_MY_CHAT_MEMBER, ON_CHAT_MEMBER, ON_CHAT_JOIN_REQUEST,
    ON_PROXIMITY_ALERT, ON_AUTO_DELETE_TIMER, ON_WEB_APP,
    ON_VIDEO_CHAT_STARTED, ON_VIDEO_CHAT_ENDED, ON_VIDEO_CHAT_PARTICIPANTS,
    ON_VIDEO_CHAT_SCHEDULED,
)