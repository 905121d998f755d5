"""Update providers: long polling and filtering middleware pollers."""

from __future__ import annotations

import queue
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable


class Poller(ABC):
    """A provider of updates."""

    @abstractmethod
    def poll(self, bot: Any, dest: queue.Queue, stop: threading.Event) -> None:
        """Put updates into dest until stop is set, then return."""


@dataclass
class LongPoller(Poller):
    """Classic long poller with a timeout in seconds."""

    limit: int = 0
    timeout: float = 0.0
    last_update_id: int = 0
    allowed_updates: list[str] = field(default_factory=list)

    def poll(self, bot: Any, dest: queue.Queue, stop: threading.Event) -> None:
        while not stop.is_set():
            try:
                updates = bot.get_updates(
                    self.last_update_id + 1, self.limit, self.timeout, self.allowed_updates
                )
            except Exception as err:  # keep polling whatever the transport raised
                debug = getattr(bot, "debug", None)
                if callable(debug):
                    debug(err)
                continue
            for update in updates:
                self.last_update_id = update.id
                dest.put(update)


@dataclass
class MiddlewarePoller(Poller):
    """Poller that sieves another poller's updates through a filter."""

    poller: Poller | None = None
    filter: Callable[[Any], bool] | None = None
    capacity: int = 1

    def poll(self, bot: Any, dest: queue.Queue, stop: threading.Event) -> None:
        if self.capacity < 1:
            self.capacity = 1

        middle: queue.Queue = queue.Queue(maxsize=self.capacity)
        stop_poller = threading.Event()
        inner = threading.Thread(
            target=self.poller.poll, args=(bot, middle, stop_poller), daemon=True
        )
        inner.start()

        while not stop.is_set():
            try:
                update = middle.get(timeout=0.05)
            except queue.Empty:
                continue
            if self.filter(update):
                dest.put(update)

        stop_poller.set()
        while inner.is_alive():
            try:
                middle.get(timeout=0.05)
            except queue.Empty:
                pass
        inner.join()


def new_middleware_poller(
    original: Poller, filter_func: Callable[[Any], bool]
) -> MiddlewarePoller:
    """Middleware poller over original using filter_func."""
    return MiddlewarePoller(poller=original, filter=filter_func)