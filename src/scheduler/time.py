# SPDX-License-Identifier: MIT

import pendulum

DATE_FORMAT = "YYYY-MM-DD"


def today() -> pendulum.Date:
    return pendulum.today().date()


def date_to_str(date: pendulum.Date) -> str:
    return date.format(DATE_FORMAT)


def date_from_str(date: str) -> pendulum.Date:
    """Parse 'YYYY-MM-DD' text into a pendulum.Date, raising ValueError if invalid."""
    parsed = pendulum.parse(date, exact=True)
    if not isinstance(parsed, pendulum.Date) or isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not a calendar date: {date}")
    return parsed


def time_to_str(hour: int, minute: int, second: int = 0) -> str:
    return pendulum.time(hour, minute, second).isoformat()


def start_of_month(date: pendulum.Date) -> pendulum.Date:
    return date.start_of("month")


def days_of_month(date: pendulum.Date) -> list[pendulum.Date]:
    """Every calendar day of the month containing the given date, in order."""
    first = start_of_month(date)
    return [first.add(days=offset) for offset in range(first.days_in_month)]
