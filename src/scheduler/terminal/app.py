# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer

from scheduler.model.command import CommandKind
from scheduler.query.sort_by import SortBy
from scheduler.terminal import event
from scheduler.terminal.custom_typer import OrderedAliasedTyperGroup
from scheduler.terminal.invoke import invoke
from scheduler.terminal.options import RequiredDateOption, TimeOption
from scheduler.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Scheduler - dated events and tasks in the CLI",
    no_args_is_help=True,
)
app.add_typer(event.app, name="event, e", help="Manipulator for events")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output"),
    ] = False,
) -> None:
    """
    Scheduler - dated events and tasks in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        logging.getLogger("scheduler").setLevel(logging.DEBUG)


@app.command("list, ls")
def list_events(
    sort: Annotated[
        Optional[SortBy],
        typer.Option("--sort", "-s", case_sensitive=False, help="column to sort by"),
    ] = None,
    desc: Annotated[bool, typer.Option("--desc", help="sort descending")] = False,
    limit: Annotated[
        Optional[int], typer.Option("--limit", "-l", min=0, help="show at most this many")
    ] = None,
) -> None:
    """
    List all the events
    """
    invoke(CommandKind.LIST, {"sort_by": sort, "descending": desc, "limit": limit})


@app.command("show, sh")
def show(
    prev: Annotated[
        Optional[int],
        typer.Option("--prev", "-p", min=0, help="how many months back"),
    ] = None,
    next: Annotated[
        Optional[int],
        typer.Option("--next", "-n", min=0, help="how many months forward"),
    ] = None,
) -> None:
    """
    Show the month, optionally a previous or next month
    """
    invoke(CommandKind.SHOW_CALENDAR, {"prev": prev, "next": next})


@app.command("date, d", no_args_is_help=True)
def date(date: RequiredDateOption, time: TimeOption = None) -> None:
    """
    Display a specific date and optionally time
    """
    invoke(CommandKind.SHOW_DATE, {"date": date, "time": time})


@app.command("clear, cl", no_args_is_help=True)
def clear(date: RequiredDateOption) -> None:
    """
    Clear all completed events from a specific date
    """
    invoke(CommandKind.CLEAR_BY_DATE, {"date": date})


@app.command("complete, co", no_args_is_help=True)
def complete(date: RequiredDateOption) -> None:
    """
    Complete all events in a specific date
    """
    invoke(CommandKind.COMPLETE_BY_DATE, {"date": date})


@app.command("delete, del", no_args_is_help=True)
def delete(date: RequiredDateOption) -> None:
    """
    Delete all events from a specific date
    """
    invoke(CommandKind.DELETE_BY_DATE, {"date": date})


def run() -> None:
    app()
