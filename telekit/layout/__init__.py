"""Typed access to a bot's configuration section."""

__all__ = ["config"]