"""General-purpose middleware: callback auto-responding, via filtering, recovery."""

from __future__ import annotations

from typing import Any, Callable

Handler = Callable[[Any], Any]
Middleware = Callable[[Handler], Handler]


def auto_respond() -> Middleware:
    """Middleware that responds to every callback once its handler has run.

    The context's ``callback()`` is checked; when it is present,
    ``respond()`` is called even if the handler raises.
    """

    def middleware(next_handler: Handler) -> Handler:
        def handler(c: Any) -> Any:
            if c.callback() is None:
                return next_handler(c)
            try:
                return next_handler(c)
            finally:
                c.respond()

        return handler

    return middleware


def ignore_via() -> Middleware:
    """Middleware that skips every message sent via a bot."""

    def middleware(next_handler: Handler) -> Handler:
        def handler(c: Any) -> Any:
            message = c.message()
            if message is not None and getattr(message, "via", None) is not None:
                return None
            return next_handler(c)

        return handler

    return middleware


def recover(on_error: Callable[[Exception], Any] | None = None) -> Middleware:
    """Middleware that catches an exception raised by the handler.

    The exception goes to ``on_error``; without one it is reported to the
    bot's ``on_error`` with no context.
    """

    def middleware(next_handler: Handler) -> Handler:
        def handler(c: Any) -> Any:
            if on_error is not None:
                report = on_error
            else:
                def report(err: Exception) -> None:
                    c.bot().on_error(err, None)

            try:
                next_handler(c)
            except Exception as err:
                report(err)
            return None

        return handler

    return middleware