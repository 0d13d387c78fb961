# SPDX-License-Identifier: MIT

from enum import Enum
from typing import NotRequired, Optional, TypedDict

from scheduler.model.criteria import Criteria
from scheduler.model.event import Event, EventFields
from scheduler.query.sort_by import SortBy


class CommandKind(Enum):
    LIST = "list"
    SHOW_CALENDAR = "show_calendar"
    SHOW_DATE = "show_date"

    # Criteria based event commands
    EVENT_SHOW = "event_show"
    EVENT_CREATE = "event_create"
    EVENT_UPDATE = "event_update"
    EVENT_COMPLETE = "event_complete"
    EVENT_REMOVE = "event_remove"

    # Whole date commands
    CLEAR_BY_DATE = "clear_by_date"
    COMPLETE_BY_DATE = "complete_by_date"
    DELETE_BY_DATE = "delete_by_date"


class CommandParams(TypedDict):
    pass


class ListParams(CommandParams):
    sort_by: Optional[SortBy]
    descending: bool
    limit: Optional[int]


class ShowCalendarParams(CommandParams):
    prev: Optional[int]
    next: Optional[int]


class ShowDateParams(CommandParams):
    date: str
    time: Optional[str]


class CriteriaParams(CommandParams):
    criteria: Criteria
    # Listing id standing in for the name criterion
    ordinal: NotRequired[Optional[int]]


class CreateParams(CommandParams):
    event: Event


class UpdateParams(CommandParams):
    criteria: Criteria
    fields: EventFields


class DateParams(CommandParams):
    date: str
