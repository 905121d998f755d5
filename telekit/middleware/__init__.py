"""Ready-made middleware for bot handlers: basic, restricting and logging."""

__all__ = ["basic", "logger", "restrict"]