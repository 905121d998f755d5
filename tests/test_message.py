from datetime import datetime
from types import SimpleNamespace

import pytest

from telekit.media import Audio, Document, Photo, Sticker, Video, VideoNote, Voice
from telekit.message import (
    AutoDeleteTimer,
    EntityType,
    Message,
    MessageEntity,
    ProximityAlert,
    Topic,
    TopicClosed,
    TopicCreated,
    TopicDeleted,
    TopicReopened,
    VideoChatEnded,
    VideoChatParticipants,
    VideoChatScheduled,
    VideoChatStarted,
)


def _chat(kind, chat_id=42):
    return SimpleNamespace(type=kind, id=chat_id)


def test_entity_type_lookup_by_wire_value():
    assert EntityType("bot_command") is EntityType.COMMAND
    assert EntityType("pre") is EntityType.CODE_BLOCK
    assert EntityType("text_mention") is EntityType.TEXT_MENTION


def test_entity_to_dict_minimal():
    entity = MessageEntity(type=EntityType.BOLD, offset=1, length=2)
    assert entity.to_dict() == {
        "type": "bold",
        "offset": 1,
        "length": 2,
        "custom_emoji_id": "",
    }


def test_entity_to_dict_optional_fields():
    user = SimpleNamespace(to_dict=lambda: {"id": 7})
    entity = MessageEntity(
        type=EntityType.TEXT_LINK, url="u", user=user, language="go"
    )
    data = entity.to_dict()
    assert data["url"] == "u"
    assert data["user"] == {"id": 7}
    assert data["language"] == "go"


def test_message_sig():
    msg = Message(id=5, chat=_chat("private", 99))
    assert msg.message_sig() == ("5", 99)


def test_time_round_trip():
    msg = Message(unixtime=1_600_000_000, last_edit=1_600_000_100)
    assert msg.time() == datetime.fromtimestamp(1_600_000_000)
    assert int(msg.last_edited().timestamp()) == 1_600_000_100


def test_forward_and_reply():
    assert not Message().is_forwarded()
    assert Message(original_sender=object()).is_forwarded()
    assert Message(original_chat=object()).is_forwarded()
    assert not Message().is_reply()
    assert Message(reply_to=Message(id=1)).is_reply()


@pytest.mark.parametrize(
    "kind, private, group, channel",
    [
        ("private", True, False, False),
        ("group", False, True, False),
        ("supergroup", False, True, False),
        ("channel", False, False, True),
    ],
)
def test_chat_kinds(kind, private, group, channel):
    msg = Message(chat=_chat(kind))
    assert msg.private() is private
    assert msg.from_group() is group
    assert msg.from_channel() is channel


def test_is_service():
    assert not Message(text="hello").is_service()
    assert Message(user_joined=object()).is_service()
    assert Message(users_joined=[object()]).is_service()
    assert Message(user_left=object()).is_service()
    assert Message(new_group_title="t").is_service()
    assert Message(new_group_photo=Photo()).is_service()
    assert Message(group_photo_deleted=True).is_service()
    assert Message(group_created=True).is_service()
    assert Message(super_group_created=True).is_service()
    assert Message(migrate_to=10).is_service()
    assert not Message(migrate_to=10, migrate_from=10).is_service()


def test_entity_text_ascii():
    msg = Message(text="hello world")
    assert msg.entity_text(MessageEntity(offset=6, length=5)) == "world"


def test_entity_text_counts_utf16_units():
    msg = Message(text="😀 hi")
    assert msg.entity_text(MessageEntity(offset=3, length=2)) == "hi"
    assert msg.entity_text(MessageEntity(offset=0, length=2)) == "😀"


def test_entity_text_uses_caption_when_no_text():
    msg = Message(caption="caption text")
    assert msg.entity_text(MessageEntity(offset=0, length=7)) == "caption"


def test_entity_text_out_of_range():
    msg = Message(text="abc")
    assert msg.entity_text(MessageEntity(offset=-1, length=2)) == ""
    assert msg.entity_text(MessageEntity(offset=2, length=5)) == ""


def test_entity_text_negative_length():
    with pytest.raises(ValueError):
        Message(text="abc").entity_text(MessageEntity(offset=2, length=-1))


def test_media_none():
    assert Message(text="x").media() is None


def test_media_priority():
    photo, voice, audio = Photo(), Voice(), Audio()
    msg = Message(photo=photo, voice=voice, audio=audio)
    assert msg.media() is photo
    msg = Message(voice=voice, audio=audio)
    assert msg.media() is voice
    sticker, document = Sticker(), Document()
    assert Message(sticker=sticker, document=document).media() is sticker
    video, note = Video(), VideoNote()
    assert Message(video=video, video_note=note).media() is video
    assert Message(video_note=note).media() is note


def test_video_chat_scheduled_starts_at():
    scheduled = VideoChatScheduled(unixtime=1_700_000_000)
    assert int(scheduled.starts_at().timestamp()) == 1_700_000_000


def test_video_chat_payloads():
    assert VideoChatStarted() == VideoChatStarted()
    assert VideoChatEnded(duration=30).duration == 30
    participants = VideoChatParticipants(users=["a", "b"])
    assert participants.users == ["a", "b"]
    assert VideoChatParticipants().users == []


def test_topic_payloads_share_topic_fields():
    created = TopicCreated(name="n", icon_color=3, thread_id=8)
    assert isinstance(created, Topic)
    assert created.name == "n"
    assert created.thread_id == 8
    assert TopicReopened(name="r").name == "r"
    assert TopicDeleted(icon_custom_emoji_id="e").icon_custom_emoji_id == "e"
    assert TopicClosed() == TopicClosed()


def test_service_payload_defaults():
    alert = ProximityAlert(distance=12)
    assert alert.distance == 12
    assert alert.traveler is None
    assert AutoDeleteTimer(unixtime=60).unixtime == 60