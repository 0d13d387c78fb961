# SPDX-License-Identifier: MIT

from typing import TypedDict

from scheduler.model.event import ListedEvent


class CalendarDay(TypedDict):
    date: str
    events: list[ListedEvent]
