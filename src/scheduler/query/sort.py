# SPDX-License-Identifier: MIT

from typing import Any, Callable, Optional

from scheduler.model.date_time import EventDateTime
from scheduler.model.event import ListedEvent
from scheduler.query.sort_by import SortBy


def sort_listing(
    listed: list[ListedEvent], sort_by: SortBy, descending: bool = False
) -> list[ListedEvent]:
    # All-day events have no time and always go last when sorting by time
    if sort_by == SortBy.TIME:
        none_items = [item for item in listed if item["event"]["time"] is None]
        value_items = [item for item in listed if item["event"]["time"] is not None]
        value_items.sort(key=lambda item: item["event"]["time"], reverse=descending)
        return value_items + none_items

    return sorted(listed, key=_sort_key(sort_by), reverse=descending)


def limit_listing(
    listed: list[ListedEvent], limit: Optional[int]
) -> list[ListedEvent]:
    if limit is None:
        return listed
    return listed[: max(limit, 0)]


def _sort_key(sort_by: SortBy) -> Callable[[ListedEvent], Any]:
    match sort_by:
        case SortBy.NAME:
            return lambda item: item["event"]["name"]
        case SortBy.DATE:
            return lambda item: item["event"]["date"]
        case SortBy.FULL_DATE:
            return lambda item: EventDateTime.from_event(item["event"])
        case SortBy.NOTE:
            return lambda item: item["event"]["note"]
        case SortBy.COMPLETE:
            return lambda item: item["event"]["complete"]
    return lambda item: item["ordinal"]
