"""Middleware chaining and handler groups sharing middleware."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

Handler = Callable[[Any], Any]
Middleware = Callable[[Handler], Handler]


def apply_middleware(handler: Handler, *middleware: Middleware) -> Handler:
    """Wrap the handler so the first middleware given runs first."""
    for wrap in reversed(middleware):
        handler = wrap(handler)
    return handler


@dataclass
class Group:
    """A group of handlers united by common middleware."""

    bot: Any
    middleware: list[Middleware] = field(default_factory=list)

    def use(self, *middleware: Middleware) -> None:
        """Add middleware to the group's chain."""
        self.middleware.extend(middleware)

    def handle(self, endpoint: Any, handler: Handler, *middleware: Middleware) -> None:
        """Register a handler on the bot with the group's and the given middleware."""
        self.bot.handle(endpoint, handler, *self.middleware, *middleware)