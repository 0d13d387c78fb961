# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from scheduler.terminal.parse import parse_date, parse_time

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
TIME_HELP = "valid inputs: HH:MM:SS or (H)H:MM"

RequiredDateOption = Annotated[
    str, typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP)
]
DateOption = Annotated[
    Optional[str], typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP)
]
TimeOption = Annotated[
    Optional[str], typer.Option("--time", "-t", parser=parse_time, help=TIME_HELP)
]
NameOption = Annotated[
    Optional[str], typer.Option("--name", "-n", help="event name, unique")
]
NoteOption = Annotated[Optional[str], typer.Option("--note", "-N", help="event note")]
CompleteOption = Annotated[
    Optional[str],
    typer.Option("--complete", "-c", help="1/true/yes for complete, 0/false/no for not"),
]
OrdinalOption = Annotated[
    Optional[int],
    typer.Option("--id", "-i", min=1, help="id shown by the most recent listing"),
]
