# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from scheduler.model.command import CommandKind
from scheduler.model.event import EventFields
from scheduler.template.criteria import get_criteria_template
from scheduler.template.event import get_event_template
from scheduler.terminal.custom_typer import AliasedTyperGroup
from scheduler.terminal.invoke import invoke
from scheduler.terminal.options import (
    DATE_HELP,
    TIME_HELP,
    CompleteOption,
    DateOption,
    NameOption,
    NoteOption,
    OrdinalOption,
    RequiredDateOption,
    TimeOption,
)
from scheduler.terminal.parse import parse_completion, parse_date, parse_time

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, s")
def show(
    date: DateOption = None,
    time: TimeOption = None,
    name: NameOption = None,
    note: NoteOption = None,
    complete: CompleteOption = None,
) -> None:
    """
    Show events that meet the criteria, if none is provided it will list all events
    """
    criteria = get_criteria_template(
        date, time, name, note, parse_completion(complete)
    )
    invoke(CommandKind.EVENT_SHOW, {"criteria": criteria})


@app.command("create, c", no_args_is_help=True)
def create(
    date: RequiredDateOption,
    time: Annotated[
        str, typer.Option("--time", "-t", parser=parse_time, help=TIME_HELP)
    ],
    name: Annotated[str, typer.Option("--name", "-n", help="event name, unique")],
    note: NoteOption = None,
) -> None:
    """
    Create an event, must have name, date, and time, optionally can include a note
    """
    event = get_event_template()
    event["date"] = date
    event["time"] = time
    event["name"] = name
    if note is not None:
        event["note"] = note
    invoke(CommandKind.EVENT_CREATE, {"event": event})


@app.command("update, u", no_args_is_help=True)
def update(
    date: DateOption = None,
    time: TimeOption = None,
    name: NameOption = None,
    note: NoteOption = None,
    complete: CompleteOption = None,
    set_date: Annotated[
        Optional[str],
        typer.Option("--set-date", "-sd", parser=parse_date, help=DATE_HELP),
    ] = None,
    set_time: Annotated[
        Optional[str],
        typer.Option("--set-time", "-st", parser=parse_time, help=TIME_HELP),
    ] = None,
    set_name: Annotated[Optional[str], typer.Option("--set-name", "-sn")] = None,
    set_note: Annotated[Optional[str], typer.Option("--set-note", "-sN")] = None,
) -> None:
    """
    Update events that meet the criteria, if none is provided it will do nothing
    """
    fields: EventFields = {}
    if set_date is not None:
        fields["date"] = set_date
    if set_time is not None:
        fields["time"] = set_time
    if set_name is not None:
        fields["name"] = set_name
    if set_note is not None:
        fields["note"] = set_note
    if len(fields) == 0:
        raise typer.BadParameter(
            "give at least one of --set-date, --set-time, --set-name, --set-note"
        )

    criteria = get_criteria_template(
        date, time, name, note, parse_completion(complete)
    )
    invoke(CommandKind.EVENT_UPDATE, {"criteria": criteria, "fields": fields})


@app.command("complete, done")
def complete(
    date: DateOption = None,
    time: TimeOption = None,
    name: NameOption = None,
    note: NoteOption = None,
    complete: CompleteOption = None,
    id: OrdinalOption = None,
) -> None:
    """
    Complete events that meet the criteria, if none is provided it will do nothing
    """
    __reject_name_with_id(name, id)
    criteria = get_criteria_template(
        date, time, name, note, parse_completion(complete)
    )
    invoke(CommandKind.EVENT_COMPLETE, {"criteria": criteria, "ordinal": id})


@app.command("remove, rm")
def remove(
    date: DateOption = None,
    time: TimeOption = None,
    name: NameOption = None,
    note: NoteOption = None,
    complete: CompleteOption = None,
    id: OrdinalOption = None,
) -> None:
    """
    Delete events that meet the criteria, if none is provided it will do nothing
    """
    __reject_name_with_id(name, id)
    criteria = get_criteria_template(
        date, time, name, note, parse_completion(complete)
    )
    invoke(CommandKind.EVENT_REMOVE, {"criteria": criteria, "ordinal": id})


def __reject_name_with_id(name: Optional[str], id: Optional[int]) -> None:
    if name is not None and id is not None:
        raise typer.BadParameter("--name and --id both select by name, give only one")
