# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

from scheduler.query.sort_by import SortBy

_default_sort: ContextVar[Optional[SortBy]] = ContextVar("default_sort", default=None)


def set_default_sort(value: Optional[SortBy]) -> None:
    _default_sort.set(value)


def get_default_sort() -> Optional[SortBy]:
    return _default_sort.get()
