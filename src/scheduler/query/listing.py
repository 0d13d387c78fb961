# SPDX-License-Identifier: MIT

from scheduler.model.event import Event, ListedEvent


def number_events(events: list[Event]) -> list[ListedEvent]:
    return [
        {"ordinal": ordinal, "event": event}
        for ordinal, event in enumerate(events, start=1)
    ]
