# SPDX-License-Identifier: MIT

import logging

import typer

from scheduler.dispatch import dispatch
from scheduler.error import SchedulerError
from scheduler.model.command import CommandKind, CommandParams

logger = logging.getLogger(__name__)


def invoke(kind: CommandKind, params: CommandParams) -> None:
    """Dispatch a command, turning scheduler errors into a message and exit status 1."""
    try:
        dispatch(kind, params)
    except SchedulerError as e:
        logger.debug("%s failed", kind.value, exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
