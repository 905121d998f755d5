# telekit

Building blocks for Telegram bots, in plain Python with no third-party
dependencies.

## What is in it

- **Keyboards** (`telekit.markup`): `ReplyMarkup`, `Btn`, `ReplyButton`,
  `InlineButton`, `Login`, `WebApp`, `WebAppData`, `MenuButton`. Helpers build
  rows, split buttons into rows and turn keyboards into the dictionaries the
  Bot API expects (`to_dict`).
- **Media and stickers** (`telekit.media`): `Photo` (with `Photo.from_api`,
  which keeps the largest of several sizes), `Audio`, `Document`, `Video`,
  `Animation`, `Voice`, `VideoNote`, `Sticker`, `Contact`, `Location`, `Venue`,
  `Dice`, `MaskPosition`, `StickerSet` and `InputMedia` for albums.
- **Messages** (`telekit.message`): `Message` with `is_forwarded`,
  `is_reply`, `is_service`, `private`, `from_group`, `from_channel`, `media`,
  and `entity_text`, which slices the text (or caption) by the UTF-16 offsets
  Telegram uses. Also `MessageEntity`, forum topic payloads and video chat
  service payloads.
- **Polls and payments** (`telekit.poll`, `telekit.payments`): `Poll`
  (`add_options`, `send_params`), `Invoice` (`params`), `Price`, `Currency`
  (`from_total`, `to_total`) and the shipping and checkout types.
- **Send options** (`telekit.options`): `SendOptions`, `Option` flags,
  `extract_options`, `placeholder`, `process_buttons` and
  `embed_send_options`, which returns request parameters extended with what
  the options ask for.
- **Middleware** (`telekit.chain`, `telekit.middleware`): `apply_middleware`
  and `Group`, plus `auto_respond`, `ignore_via` and `recover`
  (`telekit.middleware.basic`), `restrict`, `blacklist` and `whitelist`
  (`telekit.middleware.restrict`), and `logger` (`telekit.middleware.logger`).
- **Update delivery** (`telekit.poller`, `telekit.webhook`): the `Poller`
  base class, `LongPoller`, `MiddlewarePoller` for filtering another poller's
  updates, and `Webhook`, which builds its registration parameters and files,
  checks the secret-token header, decodes update bodies and can serve them
  over HTTP (or HTTPS when `tls` is set).
- **Configuration** (`telekit.layout.config`): `Config`, a typed,
  case-insensitive view over a nested mapping with dotted keys such as
  `"obj.dur"`; missing or uncastable values give the zero value of the
  requested type.

## Installing

```
pip install telekit
```

To run the test suite:

```
pip install "telekit[test]"
pytest
```

## Keyboards

```python
from telekit.markup import ReplyMarkup

menu = ReplyMarkup()
menu.reply(
    menu.row(menu.text("Menu")),
    menu.row(menu.text("Settings")),
)

pager = ReplyMarkup()
pager.inline(pager.row(
    pager.data("Previous", "prev"),
    pager.data("Next", "next", "page", "2"),
))

payload = pager.to_dict()
```

`ReplyMarkup.split(3, buttons)` breaks a flat list of six buttons into two
rows of three. A button made with `data(...)` carries a unique name, so it has
no reply form: putting it into a reply keyboard raises `ValueError`.

When options are embedded with `embed_send_options`, each inline button with a
unique name has its callback data rewritten as `"\f<unique>|<data>"` (or
`"\f<unique>"` when it carries no data).

## Polls

```python
from telekit.poll import Poll, PollType

poll = Poll(type=PollType.QUIZ, question="Ready?")
poll.add_options("Yes", "No")
params = poll.send_params()
```

## Middleware

Middleware wraps a handler; a handler takes a context object.

```python
from telekit.chain import apply_middleware
from telekit.middleware.basic import ignore_via
from telekit.middleware.restrict import whitelist


def on_start(context):
    ...


handler = apply_middleware(on_start, ignore_via(), whitelist(1001, 1002))
```

Middleware listed first runs first. The middleware call methods of the
context: `callback()` and `respond()` for `auto_respond`, `message()` for
`ignore_via`, `sender()` for the restricting ones, `update()` for `logger`,
and `bot()` for `recover` when it is given no `on_error`. `recover(on_error)`
catches an exception raised by the handler and passes it to `on_error`
instead of letting it escape.

## What it does not do

telekit has no bot client: nothing here sends requests to the Bot API or
dispatches updates to handlers. Pollers and the webhook call methods on a bot
object you supply (`get_updates`, `set_webhook`, `on_error`, `debug`), and
`Group.handle` calls that object's `handle`. There is no layout loader with
templates or locales either; `telekit.layout` offers only `Config`.