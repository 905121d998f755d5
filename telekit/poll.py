"""Polls, their options and answers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from telekit.constants import ParseMode


def _value(item: Any) -> str:
    return str(getattr(item, "value", item))


class PollType(str, Enum):
    """Kind of a poll; ANY is only meaningful for keyboard buttons."""

    ANY = "any"
    QUIZ = "quiz"
    REGULAR = "regular"

    def to_dict(self) -> dict:
        """Keyboard-button poll type object."""
        return {"type": self.value}


@dataclass
class PollOption:
    """One answer option in a poll."""

    text: str
    voter_count: int = 0


@dataclass
class PollAnswer:
    """An answer of a user in a non-anonymous poll."""

    poll_id: str = ""
    sender: Any = None
    options: list[int] = field(default_factory=list)


@dataclass
class Poll:
    """A native poll."""

    id: str = ""
    type: PollType | None = None
    question: str = ""
    options: list[PollOption] = field(default_factory=list)
    voter_count: int = 0
    closed: bool = False
    correct_option: int = 0
    multiple_answers: bool = False
    explanation: str = ""
    parse_mode: ParseMode | str = ParseMode.DEFAULT
    entities: list[Any] = field(default_factory=list)
    anonymous: bool = False
    open_period: int = 0
    close_unixdate: int = 0

    def is_regular(self) -> bool:
        return self.type == PollType.REGULAR

    def is_quiz(self) -> bool:
        return self.type == PollType.QUIZ

    def close_date(self) -> datetime:
        """Close date of the poll in local time."""
        return datetime.fromtimestamp(self.close_unixdate)

    def add_options(self, *texts: str) -> None:
        self.options.extend(PollOption(text=text) for text in texts)

    def send_params(self) -> dict[str, str]:
        """Request parameters describing this poll for sending."""
        params = {
            "question": self.question,
            "type": _value(self.type) if self.type is not None else "",
            "is_closed": _bool(self.closed),
            "is_anonymous": _bool(self.anonymous),
            "allows_multiple_answers": _bool(self.multiple_answers),
            "correct_option_id": str(self.correct_option),
        }
        if self.explanation:
            params["explanation"] = self.explanation
            params["explanation_parse_mode"] = _value(self.parse_mode)
        if self.open_period:
            params["open_period"] = str(self.open_period)
        elif self.close_unixdate:
            params["close_date"] = str(self.close_unixdate)

        texts = [option.text for option in self.options]
        params["options"] = json.dumps(
            texts or None, ensure_ascii=False, separators=(",", ":")
        )
        return params


def _bool(flag: bool) -> str:
    return "true" if flag else "false"