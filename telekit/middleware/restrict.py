"""Middleware restricting handlers to, or away from, a list of chats."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

Handler = Callable[[Any], Any]
Middleware = Callable[[Handler], Handler]


@dataclass
class RestrictConfig:
    """Chats to match and the handlers for senders inside and outside them.

    A handler left as None falls back to the wrapped handler.
    """

    chats: list[int] = field(default_factory=list)
    in_: Handler | None = None
    out: Handler | None = None


def restrict(config: RestrictConfig) -> Middleware:
    """Middleware calling ``in_`` for senders in ``chats`` and ``out`` otherwise."""

    def middleware(next_handler: Handler) -> Handler:
        inside = config.in_ if config.in_ is not None else next_handler
        outside = config.out if config.out is not None else next_handler
        chats = frozenset(config.chats)

        def handler(c: Any) -> Any:
            if c.sender().id in chats:
                return inside(c)
            return outside(c)

        return handler

    return middleware


def blacklist(*chats: int) -> Middleware:
    """Middleware skipping updates from the given senders."""
    blocked = frozenset(chats)

    def middleware(next_handler: Handler) -> Handler:
        def handler(c: Any) -> Any:
            if c.sender().id in blocked:
                return None
            return next_handler(c)

        return handler

    return middleware


def whitelist(*chats: int) -> Middleware:
    """Middleware skipping updates from every sender but the given ones."""
    allowed = frozenset(chats)

    def middleware(next_handler: Handler) -> Handler:
        def handler(c: Any) -> Any:
            if c.sender().id in allowed:
                return next_handler(c)
            return None

        return handler

    return middleware