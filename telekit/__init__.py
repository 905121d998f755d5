"""Building blocks for Telegram bots: keyboards, media, messages, send options, middleware and update delivery."""

__version__ = "0.1.0"

__all__ = [
    "chain",
    "constants",
    "layout",
    "markup",
    "media",
    "message",
    "middleware",
    "options",
    "payments",
    "poll",
    "poller",
    "webhook",
]