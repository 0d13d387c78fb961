# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from scheduler import time

TRUTHY = ("1", "true", "t", "yes", "y")
FALSY = ("0", "false", "f", "no", "n")


def parse_date(date_param: Optional[str | int]) -> Optional[str]:
    """
    Normalize a date option to YYYY-MM-DD.

    Accepts YYYY-MM-DD, today, yesterday, tomorrow, or a day offset like 1, -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return time.date_to_str(time.date_from_str(date))
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        try:
            return time.date_to_str(time.today().add(days=int(date)))
        except (ValueError, OverflowError) as e:
            raise typer.BadParameter(f"Invalid day offset: {e}")

    if date == "today" or date == "t":
        return time.date_to_str(time.today())
    if date == "yesterday" or date == "y":
        return time.date_to_str(pendulum.yesterday().date())
    if date == "tomorrow" or date == "o":
        return time.date_to_str(pendulum.tomorrow().date())
    raise typer.BadParameter(
        f"Date must be YYYY-MM-DD, today, yesterday, tomorrow or a day offset, got '{date}'"
    )


def parse_time(time_param: Optional[str]) -> Optional[str]:
    """
    Normalize a time option in (H)H:mm or (H)H:mm:ss format to HH:MM:SS.
    """
    if time_param is None:
        return None

    time_match = re.match(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$", time_param.strip())
    if not time_match:
        raise typer.BadParameter(
            f"Time must be in HH:MM or HH:MM:SS format (e.g., 8:00 or 17:30:00), got '{time_param}'"
        )

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))
    second = int(time_match.group(3) or 0)

    # Validate hour, minute and second ranges
    if hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    if minute > 59:
        raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")
    if second > 59:
        raise typer.BadParameter(f"Second must be between 0 and 59, got {second}")

    return time.time_to_str(hour, minute, second)


def parse_completion(complete_param: Optional[str]) -> Optional[bool]:
    """Read 1/true/yes as complete and 0/false/no as incomplete."""
    if complete_param is None:
        return None

    value = complete_param.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    raise typer.BadParameter(
        f"Completion must be one of {', '.join(TRUTHY + FALSY)}, got '{complete_param}'"
    )
