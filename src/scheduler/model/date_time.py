# SPDX-License-Identifier: MIT

from functools import total_ordering
from typing import Any, Optional

from scheduler.error import MalformedInputError
from scheduler.model.event import Event

DEFAULT_TIME = "11:59:59"


@total_ordering
class EventDateTime:
    """
    The date and optional time of an event as one sortable value.

    Renders as "<date> <time>", substituting 11:59:59 for all-day events.
    Comparison is on that rendered text, so it only agrees with chronological
    order for zero-padded YYYY-MM-DD and HH:MM:SS values.
    """

    def __init__(self, date: str, time: Optional[str] = None) -> None:
        self.date = date
        self.time = time

    @classmethod
    def from_str(cls, text: str) -> "EventDateTime":
        parts = text.split()
        if len(parts) < 2:
            raise MalformedInputError(
                f"expected '<date> <time>', got {text!r}"
            )
        return cls(parts[0], parts[1])

    @classmethod
    def from_event(cls, event: Event) -> "EventDateTime":
        return cls(event["date"], event["time"])

    @property
    def all_day(self) -> bool:
        return self.time is None

    def __str__(self) -> str:
        return f"{self.date} {self.time if self.time is not None else DEFAULT_TIME}"

    def __repr__(self) -> str:
        return f"EventDateTime({self.date!r}, {self.time!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, EventDateTime):
            return NotImplemented
        return str(self) == str(other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, EventDateTime):
            return NotImplemented
        return str(self) < str(other)

    def __hash__(self) -> int:
        return hash(str(self))
