"""Middleware that logs every incoming update as indented JSON."""

from __future__ import annotations

import dataclasses
import json
import logging
from enum import Enum
from typing import Any, Callable

Handler = Callable[[Any], Any]
Middleware = Callable[[Handler], Handler]


def _jsonable(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    return str(obj)


def logger(log: Any = None) -> Middleware:
    """Middleware logging the context's update; defaults to the "telekit" logger."""
    target = log if log is not None else logging.getLogger("telekit")

    def middleware(next_handler: Handler) -> Handler:
        def handler(c: Any) -> Any:
            data = json.dumps(
                c.update(), indent=2, ensure_ascii=False, default=_jsonable
            )
            target.info(data)
            return next_handler(c)

        return handler

    return middleware