"""Send options: flags, markup and the request parameters they produce."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any

from telekit.constants import ParseMode
from telekit.markup import InlineButton, ReplyMarkup
from telekit.message import Message, MessageEntity


class Option(IntEnum):
    """Shortcut flags accepted in place of a full SendOptions."""

    NO_PREVIEW = 0
    SILENT = 1
    ALLOW_WITHOUT_REPLY = 2
    PROTECTED = 3
    FORCE_REPLY = 4
    ONE_TIME_KEYBOARD = 5
    REMOVE_KEYBOARD = 6


_SIMPLE_FLAGS = {
    Option.NO_PREVIEW: "disable_web_page_preview",
    Option.SILENT: "disable_notification",
    Option.ALLOW_WITHOUT_REPLY: "allow_without_reply",
    Option.PROTECTED: "protected",
}

_MARKUP_FLAGS = {
    Option.FORCE_REPLY: "force_reply",
    Option.ONE_TIME_KEYBOARD: "one_time_keyboard",
    Option.REMOVE_KEYBOARD: "remove_keyboard",
}


def _value(item: Any) -> str:
    return str(getattr(item, "value", item))


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


@dataclass
class SendOptions:
    """Complete control over how a message is sent."""

    reply_to: Message | None = None
    reply_markup: ReplyMarkup | None = None
    disable_web_page_preview: bool = False
    disable_notification: bool = False
    parse_mode: ParseMode | str = ParseMode.DEFAULT
    entities: list[MessageEntity] = field(default_factory=list)
    allow_without_reply: bool = False
    protected: bool = False
    thread_id: int = 0

    def copy(self) -> SendOptions:
        """Copy with the reply markup duplicated."""
        return replace(
            self,
            reply_markup=self.reply_markup.copy() if self.reply_markup is not None else None,
            entities=list(self.entities),
        )


def placeholder(text: str) -> SendOptions:
    """Options forcing a reply with the given input field placeholder."""
    return SendOptions(reply_markup=ReplyMarkup(force_reply=True, placeholder=text))


def _apply_flag(opts: SendOptions, flag: Option) -> None:
    if flag in _SIMPLE_FLAGS:
        setattr(opts, _SIMPLE_FLAGS[flag], True)
    elif flag in _MARKUP_FLAGS:
        if opts.reply_markup is None:
            opts.reply_markup = ReplyMarkup()
        setattr(opts.reply_markup, _MARKUP_FLAGS[flag], True)
    else:
        raise TypeError("telekit: unsupported flag-option")


def extract_options(*how: Any) -> SendOptions:
    """Combine send options, markups, flags, parse modes and entities into one."""
    opts = SendOptions()
    for prop in how:
        if prop is None:
            continue
        if isinstance(prop, SendOptions):
            opts = prop.copy()
        elif isinstance(prop, ReplyMarkup):
            opts.reply_markup = prop.copy()
        elif isinstance(prop, Option):
            _apply_flag(opts, prop)
        elif isinstance(prop, str):
            opts.parse_mode = prop
        elif isinstance(prop, (list, tuple)) and all(
            isinstance(entity, MessageEntity) for entity in prop
        ):
            opts.entities = list(prop)
        else:
            raise TypeError("telekit: unsupported send-option")
    return opts


def process_buttons(keys: list[list[InlineButton]]) -> None:
    """Encode the unique name of each named button into its callback data."""
    if not keys or not keys[0]:
        return
    for row in keys:
        for key in row:
            if key.unique:
                key.data = (
                    f"\f{key.unique}|{key.data}" if key.data else f"\f{key.unique}"
                )


def embed_send_options(
    params: dict[str, str],
    options: SendOptions | None = None,
    default_parse_mode: ParseMode | str = ParseMode.DEFAULT,
) -> dict[str, str]:
    """Request parameters extended with what the options ask for."""
    result = dict(params)
    if _value(default_parse_mode):
        result["parse_mode"] = _value(default_parse_mode)

    if options is None:
        return result

    if options.reply_to is not None and options.reply_to.id:
        result["reply_to_message_id"] = str(options.reply_to.id)
    if options.disable_web_page_preview:
        result["disable_web_page_preview"] = "true"
    if options.disable_notification:
        result["disable_notification"] = "true"
    if _value(options.parse_mode):
        result["parse_mode"] = _value(options.parse_mode)

    if options.entities:
        result.pop("parse_mode", None)
        entities = _dumps([entity.to_dict() for entity in options.entities])
        if result.get("caption"):
            result["caption_entities"] = entities
        else:
            result["entities"] = entities

    if options.allow_without_reply:
        result["allow_sending_without_reply"] = "true"

    if options.reply_markup is not None:
        markup = options.reply_markup.copy()
        process_buttons(markup.inline_keyboard)
        result["reply_markup"] = _dumps(markup.to_dict())

    if options.protected:
        result["protect_content"] = "true"
    if options.thread_id:
        result["message_thread_id"] = str(options.thread_id)
    return result