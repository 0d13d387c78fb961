# SPDX-License-Identifier: MIT

from scheduler.model.event import Event

DEFAULT_NOTE = "None"


def get_event_template() -> Event:
    return {
        "date": "",
        "time": None,
        "name": "",
        "note": DEFAULT_NOTE,
        "complete": False,
    }
