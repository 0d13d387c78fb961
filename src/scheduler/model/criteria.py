# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class Criteria(TypedDict):
    date: Optional[str]
    time: Optional[str]
    name: Optional[str]
    note: Optional[str]
    complete: Optional[bool]
