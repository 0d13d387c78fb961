# SPDX-License-Identifier: MIT

from enum import StrEnum


class SortBy(StrEnum):
    ID = "id"
    NAME = "name"
    DATE = "date"
    TIME = "time"
    FULL_DATE = "full-date"
    NOTE = "note"
    COMPLETE = "complete"


def sort_by_from_str(value: str) -> SortBy:
    """Resolve a sort name case-insensitively, falling back to listing order."""
    try:
        return SortBy(value.strip().lower())
    except ValueError:
        return SortBy.ID
