"""Media objects: photos, audio, documents, videos, stickers and the like."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


def _encode(item: Any) -> Any:
    to_dict = getattr(item, "to_dict", None)
    return to_dict() if callable(to_dict) else item


@dataclass
class InputMedia:
    """Composite media description used when sending or editing albums."""

    type: str = ""
    media: str = ""
    caption: str = ""
    thumbnail: str = ""
    parse_mode: str = ""
    entities: list[Any] = field(default_factory=list)
    width: int = 0
    height: int = 0
    duration: int = 0
    title: str = ""
    performer: str = ""
    streaming: bool = False
    disable_type_detection: bool = False

    def to_dict(self) -> dict:
        """API form; the caption is always present, other empty fields are left out."""
        result: dict = {"type": self.type, "media": self.media, "caption": self.caption}
        if self.thumbnail:
            result["thumb"] = self.thumbnail
        if self.parse_mode:
            result["parse_mode"] = str(getattr(self.parse_mode, "value", self.parse_mode))
        if self.entities:
            result["caption_entities"] = [_encode(e) for e in self.entities]
        for key, value in (
            ("width", self.width),
            ("height", self.height),
            ("duration", self.duration),
            ("title", self.title),
            ("performer", self.performer),
        ):
            if value:
                result[key] = value
        if self.streaming:
            result["supports_streaming"] = True
        if self.disable_type_detection:
            result["disable_content_type_detection"] = True
        return result


def _attach_name(file: Any, name: str) -> Any:
    if file is not None and hasattr(file, "file_name"):
        file.file_name = name
    return file


@dataclass
class Photo:
    """A single photo file."""

    file: Any = None
    width: int = 0
    height: int = 0
    caption: str = ""

    @classmethod
    def from_api(cls, data: Any) -> Photo:
        """Build a photo from one size or a list of sizes, keeping the largest (last)."""
        if isinstance(data, (str, bytes, bytearray)):
            data = json.loads(data)
        if isinstance(data, Mapping):
            size = data
        else:
            sizes = list(data)
            if not sizes:
                raise ValueError("photo has no sizes")
            size = sizes[-1]
        size = dict(size)
        width = int(size.pop("width", 0) or 0)
        height = int(size.pop("height", 0) or 0)
        size.pop("caption", None)
        return cls(file=size, width=width, height=height)

    def media_type(self) -> str:
        return "photo"

    def media_file(self) -> Any:
        return self.file

    def input_media(self) -> InputMedia:
        return InputMedia(type=self.media_type(), caption=self.caption)


@dataclass
class Audio:
    """An audio file."""

    file: Any = None
    duration: int = 0
    caption: str = ""
    thumbnail: Photo | None = None
    title: str = ""
    performer: str = ""
    mime: str = ""
    file_name: str = ""

    def media_type(self) -> str:
        return "audio"

    def media_file(self) -> Any:
        return _attach_name(self.file, self.file_name)

    def input_media(self) -> InputMedia:
        return InputMedia(
            type=self.media_type(),
            caption=self.caption,
            duration=self.duration,
            title=self.title,
            performer=self.performer,
        )


@dataclass
class Document:
    """A general file, as opposed to a photo or an audio file."""

    file: Any = None
    thumbnail: Photo | None = None
    caption: str = ""
    mime: str = ""
    file_name: str = ""
    disable_type_detection: bool = False

    def media_type(self) -> str:
        return "document"

    def media_file(self) -> Any:
        return _attach_name(self.file, self.file_name)

    def input_media(self) -> InputMedia:
        return InputMedia(
            type=self.media_type(),
            caption=self.caption,
            disable_type_detection=self.disable_type_detection,
        )


@dataclass
class Video:
    """A video file."""

    file: Any = None
    width: int = 0
    height: int = 0
    duration: int = 0
    caption: str = ""
    thumbnail: Photo | None = None
    streaming: bool = False
    mime: str = ""
    file_name: str = ""

    def media_type(self) -> str:
        return "video"

    def media_file(self) -> Any:
        return _attach_name(self.file, self.file_name)

    def input_media(self) -> InputMedia:
        return InputMedia(
            type=self.media_type(),
            caption=self.caption,
            width=self.width,
            height=self.height,
            duration=self.duration,
            streaming=self.streaming,
        )


@dataclass
class Animation:
    """An animation file."""

    file: Any = None
    width: int = 0
    height: int = 0
    duration: int = 0
    caption: str = ""
    thumbnail: Photo | None = None
    mime: str = ""
    file_name: str = ""

    def media_type(self) -> str:
        return "animation"

    def media_file(self) -> Any:
        return _attach_name(self.file, self.file_name)

    def input_media(self) -> InputMedia:
        return InputMedia(
            type=self.media_type(),
            caption=self.caption,
            width=self.width,
            height=self.height,
            duration=self.duration,
        )


@dataclass
class Voice:
    """A voice note."""

    file: Any = None
    duration: int = 0
    caption: str = ""
    mime: str = ""

    def media_type(self) -> str:
        return "voice"

    def media_file(self) -> Any:
        return self.file


@dataclass
class VideoNote:
    """A video message."""

    file: Any = None
    duration: int = 0
    thumbnail: Photo | None = None
    length: int = 0

    def media_type(self) -> str:
        return "videoNote"

    def media_file(self) -> Any:
        return self.file


class MaskFeature(str, Enum):
    """Part of the face a mask is placed on."""

    FOREHEAD = "forehead"
    EYES = "eyes"
    MOUTH = "mouth"
    CHIN = "chin"


@dataclass
class MaskPosition:
    """Default position of a mask on a face."""

    feature: MaskFeature | str = MaskFeature.FOREHEAD
    x_shift: float = 0.0
    y_shift: float = 0.0
    scale: float = 0.0

    def to_dict(self) -> dict:
        return {
            "point": str(getattr(self.feature, "value", self.feature)),
            "x_shift": self.x_shift,
            "y_shift": self.y_shift,
            "scale": self.scale,
        }


@dataclass
class Sticker:
    """A sticker image."""

    file: Any = None
    width: int = 0
    height: int = 0
    animated: bool = False
    video: bool = False
    thumbnail: Photo | None = None
    emoji: str = ""
    set_name: str = ""
    mask_position: MaskPosition | None = None
    premium_animation: Any = None

    def media_type(self) -> str:
        return "sticker"

    def media_file(self) -> Any:
        return self.file


@dataclass
class Contact:
    """A contact of a Telegram user."""

    phone_number: str = ""
    first_name: str = ""
    last_name: str = ""
    user_id: int = 0


@dataclass
class Location:
    """A geographic position."""

    lat: float = 0.0
    lng: float = 0.0
    horizontal_accuracy: float | None = None
    heading: int = 0
    alert_radius: int = 0
    live_period: int = 0


@dataclass
class Venue:
    """A venue with a name, an address and optional place identifiers."""

    location: Location = field(default_factory=Location)
    title: str = ""
    address: str = ""
    foursquare_id: str = ""
    foursquare_type: str = ""
    google_place_id: str = ""
    google_place_type: str = ""


class DiceType(str, Enum):
    """Emoji on which a dice is based."""

    CUBE = "🎲"
    DART = "🎯"
    BALL = "🏀"
    GOAL = "⚽"
    SLOT = "🎰"
    BOWL = "🎳"


@dataclass
class Dice:
    """A dice with a random value."""

    type: DiceType | str = DiceType.CUBE
    value: int = 0


CUBE = Dice(type=DiceType.CUBE)
DART = Dice(type=DiceType.DART)
BALL = Dice(type=DiceType.BALL)
GOAL = Dice(type=DiceType.GOAL)
SLOT = Dice(type=DiceType.SLOT)
BOWL = Dice(type=DiceType.BOWL)


class StickerSetType(str, Enum):
    REGULAR = "regular"
    MASK = "mask"
    CUSTOM_EMOJI = "custom_emoji"


@dataclass
class StickerSet:
    """A sticker set."""

    type: StickerSetType | str = StickerSetType.REGULAR
    name: str = ""
    title: str = ""
    animated: bool = False
    video: bool = False
    stickers: list[Sticker] = field(default_factory=list)
    thumbnail: Photo | None = None
    png: Any = None
    tgs: Any = None
    webm: Any = None
    emojis: str = ""
    contains_masks: bool = False
    mask_position: MaskPosition | None = None