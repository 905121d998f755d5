"""Reply and inline keyboards, their buttons and web-app descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable

from telekit.poll import PollType


@dataclass
class WebApp:
    """A web app launched by a keyboard button."""

    url: str = ""


@dataclass
class WebAppMessage:
    """An inline message sent by a web app on behalf of a user."""

    inline_message_id: str = ""


@dataclass
class WebAppData:
    """Data sent from a web app to the bot."""

    data: str = ""
    text: str = ""


@dataclass
class Login:
    """Inline button parameter used to authorise a user automatically."""

    url: str = ""
    text: str = ""
    username: str = ""
    write_access: bool = False


class MenuButtonType(str, Enum):
    DEFAULT = "default"
    COMMANDS = "commands"
    WEB_APP = "web_app"


@dataclass
class MenuButton:
    """The bot's menu button in a private chat."""

    type: MenuButtonType
    text: str = ""
    web_app: WebApp | None = None


def _web_app_dict(app: WebApp) -> dict:
    return {"url": app.url}


def _login_dict(login: Login) -> dict:
    result: dict = {"url": login.url}
    if login.text:
        result["forward_text"] = login.text
    if login.username:
        result["bot_username"] = login.username
    if login.write_access:
        result["request_write_access"] = True
    return result


@dataclass
class ReplyButton:
    """A button displayed in a reply keyboard."""

    text: str = ""
    contact: bool = False
    location: bool = False
    poll: PollType | None = None
    web_app: WebApp | None = None

    def to_dict(self) -> dict:
        result: dict = {"text": self.text}
        if self.contact:
            result["request_contact"] = True
        if self.location:
            result["request_location"] = True
        if self.poll:
            result["request_poll"] = PollType(self.poll).to_dict()
        if self.web_app is not None:
            result["web_app"] = _web_app_dict(self.web_app)
        return result


@dataclass
class InlineButton:
    """A button displayed in the message."""

    unique: str = ""
    text: str = ""
    url: str = ""
    data: str = ""
    inline_query: str = ""
    inline_query_chat: str = ""
    login: Login | None = None
    web_app: WebApp | None = None

    def to_dict(self) -> dict:
        """API form; the current-chat query is dropped when empty next to a login or web app."""
        result: dict = {}
        if self.unique:
            result["unique"] = self.unique
        result["text"] = self.text
        if self.url:
            result["url"] = self.url
        if self.data:
            result["callback_data"] = self.data
        if self.inline_query:
            result["switch_inline_query"] = self.inline_query
        if (self.login is None and self.web_app is None) or self.inline_query_chat:
            result["switch_inline_query_current_chat"] = self.inline_query_chat
        if self.login is not None:
            result["login_url"] = _login_dict(self.login)
        if self.web_app is not None:
            result["web_app"] = _web_app_dict(self.web_app)
        return result

    def with_data(self, data: str) -> InlineButton:
        """Copy of the button carrying the given data; the web app is not kept."""
        return replace(self, data=data, web_app=None)


@dataclass
class Btn:
    """A button under construction, later turned into a reply or an inline one."""

    unique: str = ""
    text: str = ""
    url: str = ""
    data: str = ""
    inline_query: str = ""
    inline_query_chat: str = ""
    contact: bool = False
    location: bool = False
    poll: PollType | None = None
    login: Login | None = None
    web_app: WebApp | None = None

    def reply(self) -> ReplyButton | None:
        """Reply form of the button, or None for buttons with a unique name."""
        if self.unique:
            return None
        return ReplyButton(
            text=self.text,
            contact=self.contact,
            location=self.location,
            poll=self.poll,
            web_app=self.web_app,
        )

    def inline(self) -> InlineButton:
        return InlineButton(
            unique=self.unique,
            text=self.text,
            url=self.url,
            data=self.data,
            inline_query=self.inline_query,
            inline_query_chat=self.inline_query_chat,
            login=self.login,
            web_app=self.web_app,
        )


Row = list[Btn]


@dataclass
class ReplyMarkup:
    """Reply keyboard or inline keyboard options for a message."""

    inline_keyboard: list[list[InlineButton]] = field(default_factory=list)
    reply_keyboard: list[list[ReplyButton]] = field(default_factory=list)
    force_reply: bool = False
    resize_keyboard: bool = False
    one_time_keyboard: bool = False
    remove_keyboard: bool = False
    selective: bool = False
    placeholder: str = ""

    def row(self, *buttons: Btn) -> Row:
        return list(buttons)

    def split(self, max_per_row: int, buttons: Iterable[Btn]) -> list[Row]:
        """Split buttons into rows of at most max_per_row each."""
        if max_per_row < 1:
            raise ValueError("max_per_row must be positive")
        items = list(buttons)
        return [items[i:i + max_per_row] for i in range(0, len(items), max_per_row)]

    def inline(self, *rows: Row) -> None:
        self.inline_keyboard = [[button.inline() for button in row] for row in rows]

    def reply(self, *rows: Row) -> None:
        keyboard = []
        for i, row in enumerate(rows):
            keys = []
            for j, button in enumerate(row):
                key = button.reply()
                if key is None:
                    raise ValueError(
                        f"telekit: button row {i} column {j} is not a reply button"
                    )
                keys.append(key)
            keyboard.append(keys)
        self.reply_keyboard = keyboard

    def text(self, text: str) -> Btn:
        return Btn(text=text)

    def contact(self, text: str) -> Btn:
        return Btn(contact=True, text=text)

    def location(self, text: str) -> Btn:
        return Btn(location=True, text=text)

    def poll(self, text: str, poll_type: PollType) -> Btn:
        return Btn(poll=poll_type, text=text)

    def data(self, text: str, unique: str, *data: str) -> Btn:
        return Btn(unique=unique, text=text, data="|".join(data))

    def url(self, text: str, url: str) -> Btn:
        return Btn(text=text, url=url)

    def query(self, text: str, query: str) -> Btn:
        return Btn(text=text, inline_query=query)

    def query_chat(self, text: str, query: str) -> Btn:
        return Btn(text=text, inline_query_chat=query)

    def login(self, text: str, login: Login) -> Btn:
        return Btn(login=login, text=text)

    def web_app(self, text: str, app: WebApp) -> Btn:
        return Btn(text=text, web_app=app)

    def copy(self) -> ReplyMarkup:
        """Copy with keyboards and buttons duplicated."""
        return replace(
            self,
            reply_keyboard=[[replace(b) for b in row] for row in self.reply_keyboard],
            inline_keyboard=[[replace(b) for b in row] for row in self.inline_keyboard],
        )

    def to_dict(self) -> dict:
        result: dict = {}
        if self.inline_keyboard:
            result["inline_keyboard"] = [
                [button.to_dict() for button in row] for row in self.inline_keyboard
            ]
        if self.reply_keyboard:
            result["keyboard"] = [
                [button.to_dict() for button in row] for row in self.reply_keyboard
            ]
        for key, flag in (
            ("force_reply", self.force_reply),
            ("resize_keyboard", self.resize_keyboard),
            ("one_time_keyboard", self.one_time_keyboard),
            ("remove_keyboard", self.remove_keyboard),
            ("selective", self.selective),
        ):
            if flag:
                result[key] = True
        if self.placeholder:
            result["input_field_placeholder"] = self.placeholder
        return result