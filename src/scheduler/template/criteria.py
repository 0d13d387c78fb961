# SPDX-License-Identifier: MIT

from typing import Optional

from scheduler.model.criteria import Criteria


def get_criteria_template(
    date: Optional[str] = None,
    time: Optional[str] = None,
    name: Optional[str] = None,
    note: Optional[str] = None,
    complete: Optional[bool] = None,
) -> Criteria:
    return {
        "date": date,
        "time": time,
        "name": name,
        "note": note,
        "complete": complete,
    }
