import json

import pytest

from telekit.constants import ParseMode
from telekit.markup import InlineButton, ReplyMarkup
from telekit.message import EntityType, Message, MessageEntity
from telekit.options import (
    Option,
    SendOptions,
    embed_send_options,
    extract_options,
    placeholder,
    process_buttons,
)


def test_placeholder_forces_reply():
    opts = placeholder("Type here")
    assert opts.reply_markup == ReplyMarkup(force_reply=True, placeholder="Type here")


def test_copy_equals_original_with_distinct_markup():
    r = ReplyMarkup()
    r.reply(r.row(r.text("Menu")), r.row(r.text("Settings")))
    o = SendOptions(reply_markup=r)
    cp = o.copy()
    assert cp == o
    assert cp.reply_markup is not o.reply_markup
    cp.reply_markup.reply_keyboard[0][0].text = "Changed"
    assert o.reply_markup.reply_keyboard[0][0].text == "Menu"


def test_extract_simple_flags():
    opts = extract_options(
        Option.NO_PREVIEW, Option.SILENT, Option.ALLOW_WITHOUT_REPLY, Option.PROTECTED
    )
    assert opts.disable_web_page_preview
    assert opts.disable_notification
    assert opts.allow_without_reply
    assert opts.protected
    assert opts.reply_markup is None


def test_extract_markup_flags_create_markup():
    opts = extract_options(
        Option.FORCE_REPLY, Option.ONE_TIME_KEYBOARD, Option.REMOVE_KEYBOARD
    )
    assert opts.reply_markup == ReplyMarkup(
        force_reply=True, one_time_keyboard=True, remove_keyboard=True
    )


def test_extract_copies_send_options_and_markup():
    original = SendOptions(disable_notification=True, reply_markup=ReplyMarkup(selective=True))
    opts = extract_options(original)
    assert opts == original
    assert opts is not original
    assert opts.reply_markup is not original.reply_markup

    markup = ReplyMarkup(resize_keyboard=True)
    opts = extract_options(markup, Option.FORCE_REPLY)
    assert opts.reply_markup.resize_keyboard
    assert opts.reply_markup.force_reply
    assert not markup.force_reply


def test_extract_parse_mode_and_entities():
    entities = [MessageEntity(type=EntityType.BOLD, offset=0, length=3)]
    opts = extract_options(ParseMode.HTML, entities)
    assert opts.parse_mode == ParseMode.HTML
    assert opts.entities == entities


def test_extract_rejects_unsupported():
    with pytest.raises(TypeError):
        extract_options(3.5)


def test_process_buttons_encodes_unique():
    keys = [[
        InlineButton(unique="prev", text="Previous"),
        InlineButton(unique="next", text="Next", data="1"),
        InlineButton(text="Plain", data="x"),
    ]]
    process_buttons(keys)
    assert keys[0][0].data == "\fprev"
    assert keys[0][1].data == "\fnext|1"
    assert keys[0][2].data == "x"


def test_process_buttons_empty_first_row_untouched():
    keys = [[], [InlineButton(unique="u", text="T")]]
    process_buttons(keys)
    assert keys[1][0].data == ""


def test_embed_default_parse_mode_without_options():
    params = embed_send_options({"chat_id": "1"}, None, ParseMode.HTML)
    assert params == {"chat_id": "1", "parse_mode": "HTML"}


def test_embed_flags_and_ids():
    opts = SendOptions(
        reply_to=Message(id=42),
        disable_web_page_preview=True,
        disable_notification=True,
        allow_without_reply=True,
        protected=True,
        thread_id=9,
        parse_mode=ParseMode.MARKDOWN_V2,
    )
    params = embed_send_options({}, opts, ParseMode.HTML)
    assert params["reply_to_message_id"] == "42"
    assert params["message_thread_id"] == "9"
    assert params["parse_mode"] == "MarkdownV2"
    for key in (
        "disable_web_page_preview",
        "disable_notification",
        "allow_sending_without_reply",
        "protect_content",
    ):
        assert params[key] == "true"


def test_embed_entities_replace_parse_mode():
    entity = MessageEntity(type=EntityType.BOLD, offset=0, length=2)
    opts = SendOptions(entities=[entity])
    params = embed_send_options({}, opts, ParseMode.HTML)
    assert "parse_mode" not in params
    assert json.loads(params["entities"]) == [entity.to_dict()]

    params = embed_send_options({"caption": "hi"}, opts)
    assert json.loads(params["caption_entities"]) == [entity.to_dict()]
    assert "entities" not in params


def test_embed_reply_markup_processes_buttons():
    markup = ReplyMarkup()
    markup.inline(markup.row(markup.data("Previous", "prev")))
    params = embed_send_options({}, SendOptions(reply_markup=markup))
    expected = ReplyMarkup(
        inline_keyboard=[[InlineButton(unique="prev", text="Previous", data="\fprev")]]
    )
    assert json.loads(params["reply_markup"]) == expected.to_dict()
    assert markup.inline_keyboard[0][0].data == ""