"""Typed, case-insensitive access to the "config" section of a layout."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Any

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_DURATION_PART = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_LEGACY_OCTAL = re.compile(r"^[+-]?0[0-7]+$")
_ZERO_DECIMAL = re.compile(r"^([+-]?\d+)\.0+$")


def _lower_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    return value


def _format_float(value: float) -> str:
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return ""


def _parse_int(text: str) -> int | None:
    match = _ZERO_DECIMAL.match(text)
    if match:
        text = match.group(1)
    try:
        return int(text, 0)
    except ValueError:
        pass
    if _LEGACY_OCTAL.match(text):
        return int(text, 8)
    return None


def _to_int(value: Any) -> int | None:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    if isinstance(value, str):
        return _parse_int(value)
    return None


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        if value in _TRUE:
            return True
        return False
    return False


def _parse_go_duration(text: str) -> int | None:
    """Nanoseconds in a duration such as "1h30m" or "-2.5s", or None."""
    sign = 1
    if text and text[0] in "+-":
        if text[0] == "-":
            sign = -1
        text = text[1:]
    if text == "0":
        return 0
    if not text:
        return None
    total = Decimal(0)
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if match is None:
            return None
        try:
            total += Decimal(match.group(1)) * _UNITS[match.group(2)]
        except InvalidOperation:
            return None
        pos = match.end()
    return sign * int(total)


def _nanoseconds(value: Any) -> int:
    if isinstance(value, timedelta):
        return (value.days * 86_400 + value.seconds) * 1_000_000_000 + value.microseconds * 1_000
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return int(value)
    if isinstance(value, str):
        if any(unit in value for unit in "nsuµmh"):
            parsed = _parse_go_duration(value)
        else:
            parsed = _parse_go_duration(value + "ns")
        return parsed if parsed is not None else 0
    return 0


def _to_timedelta(ns: int) -> timedelta:
    seconds, rest = divmod(ns, 1_000_000_000)
    return timedelta(seconds=seconds, microseconds=rest / 1_000)


class Config:
    """Nested configuration values with keys matched case-insensitively.

    Keys may be dotted paths into nested mappings ("obj.dur"). Missing or
    uncastable values give the zero value of the requested type.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = _lower_keys(data or {})

    def __repr__(self) -> str:
        return f"Config({self._data!r})"

    def _lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in key.lower().split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node

    def get(self, key: str) -> Config | None:
        """Child mapping wrapped into a Config, or None if the field isn't a mapping."""
        value = self._lookup(key)
        if not isinstance(value, Mapping):
            return None
        return Config(value)

    def slice(self, key: str) -> list[Config] | None:
        """Child list of mappings wrapped into Configs, or None otherwise."""
        value = self._lookup(key)
        if not isinstance(value, list):
            return None
        result = []
        for item in value:
            if not isinstance(item, Mapping):
                return None
            result.append(Config(item))
        return result

    def string(self, key: str) -> str:
        return _to_string(self._lookup(key))

    def int(self, key: str) -> int:
        result = _to_int(self._lookup(key))
        return result if result is not None else 0

    def float(self, key: str) -> float:
        return _to_float(self._lookup(key))

    def bool(self, key: str) -> bool:
        return _to_bool(self._lookup(key))

    def duration(self, key: str) -> timedelta:
        """Duration from a number of nanoseconds or a string such as "10m" or "1h30m"."""
        return _to_timedelta(_nanoseconds(self._lookup(key)))

    def strings(self, key: str) -> list[str]:
        """List of strings; a single string is split on whitespace."""
        value = self._lookup(key)
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [_to_string(item) for item in value]
        if isinstance(value, str):
            return value.split()
        if isinstance(value, (bool, int, float)):
            return [_to_string(value)]
        return []

    def ints(self, key: str) -> list[int]:
        """List of integers; empty if any element cannot be cast."""
        value = self._lookup(key)
        if not isinstance(value, (list, tuple)):
            return []
        result = []
        for item in value:
            number = _to_int(item)
            if number is None:
                return []
            result.append(number)
        return result

    def floats(self, key: str) -> list[float]:
        """List of floats parsed from the string forms of the elements."""
        result = []
        for text in self.strings(key):
            try:
                result.append(float(text))
            except ValueError:
                result.append(0.0)
        return result