# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class Event(TypedDict):
    date: str
    time: Optional[str]
    name: str
    note: str
    complete: bool


class EventFields(TypedDict, total=False):
    """Subset of event fields to overwrite in an update."""

    date: str
    time: Optional[str]
    name: str
    note: str
    complete: bool


class ListedEvent(TypedDict):
    """
    An event paired with its view-time ordinal.

    The ordinal is the 1-based position of the row in the order storage
    returned it for this listing. It is not stored anywhere and changes as
    soon as rows are added or removed, so it must be recomputed for every
    listing.
    """

    ordinal: int
    event: Event
