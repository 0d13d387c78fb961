# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.table import Table

from scheduler.model.calendar import CalendarDay
from scheduler.model.event import ListedEvent
from scheduler.view.views.header import header

# Ids only match `--id` resolution in the unfiltered listing, so filtered views
# leave them out.
EVENT_COLUMNS = ["date", "time", "name", "note", "complete"]
ALL_COLUMNS = ["id", *EVENT_COLUMNS]

COLUMN_STYLES = {
    "date": "red",
    "time": "red",
    "name": "green",
    "note": "blue",
    "complete": "magenta",
}


def _column_value(listed: ListedEvent, column: str) -> str:
    if column == "id":
        return str(listed["ordinal"])
    value = listed["event"][column]  # type: ignore[literal-required]
    if value is None:
        return ""
    return escape(str(value))


def _events_table(listed: list[ListedEvent], columns: list[str]) -> Table:
    events_table = Table(box=box.SIMPLE)
    for column in columns:
        events_table.add_column(column, style=COLUMN_STYLES.get(column))

    for item in listed:
        events_table.add_row(*[_column_value(item, column) for column in columns])

    return events_table


def events_view(
    report_name: str,
    listed: list[ListedEvent],
    columns: list[str] = ALL_COLUMNS,
) -> None:
    header(report_name)

    console = Console()
    if len(listed) == 0:
        console.print(Padding("[dim]no events[/dim]", (0, 1)))
        return
    console.print(_events_table(listed, columns))


def date_view(date: str, time: Optional[str], listed: list[ListedEvent]) -> None:
    """Events of one date; the date column and, when given, the time column are implied."""
    console = Console()
    if time is None:
        console.print(Padding(f"[bold]Date: {escape(date)}[/bold]", (0, 1)))
        columns = [column for column in EVENT_COLUMNS if column != "date"]
    else:
        console.print(
            Padding(f"[bold]Date: {escape(date)}, Time: {escape(time)}[/bold]", (0, 1))
        )
        columns = [column for column in EVENT_COLUMNS if column not in ("date", "time")]

    if len(listed) == 0:
        console.print(Padding("[dim]no events[/dim]", (0, 3)))
        return
    console.print(_events_table(listed, columns))


def calendar_view(month: str, days: list[CalendarDay]) -> None:
    header(month)
    for day in days:
        date_view(day["date"], None, day["events"])


def summary_view(message: str) -> None:
    console = Console()
    console.print(Padding(escape(message), (0, 1)))
