# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from scheduler import time
from scheduler.model.calendar import CalendarDay
from scheduler.query.listing import number_events
from scheduler.repository.event import EventRepository
from scheduler.template.criteria import get_criteria_template

logger = logging.getLogger(__name__)


def calendar_month(
    prev: Optional[int] = None,
    next: Optional[int] = None,
    today: Optional[pendulum.Date] = None,
) -> pendulum.Date:
    """
    First day of the month reached from today by adding next months and then
    subtracting prev months.

    A step that would leave the representable date range falls back to
    today instead of failing. The fallback always restarts from today, so an
    out of range prev also discards a next offset that was applied
    successfully.
    """
    current = today if today is not None else time.today()

    try:
        moved = current.add(months=next or 0)
    except (ValueError, OverflowError):
        logger.debug("next=%s is out of range, using the current month", next)
        moved = current

    try:
        moved = moved.subtract(months=prev or 0)
    except (ValueError, OverflowError):
        logger.debug("prev=%s is out of range, using the current month", prev)
        moved = current

    return time.start_of_month(moved)


def calendar_days(month: pendulum.Date) -> list[pendulum.Date]:
    return time.days_of_month(month)


def calendar_listing(
    repository: EventRepository, month: pendulum.Date
) -> list[CalendarDay]:
    """One block per day of month, including days without events."""
    listing: list[CalendarDay] = []
    for day in calendar_days(month):
        date = time.date_to_str(day)
        events = repository.query_events(get_criteria_template(date=date))
        listing.append({"date": date, "events": number_events(events)})
    return listing
