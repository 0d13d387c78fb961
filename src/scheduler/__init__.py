# SPDX-License-Identifier: MIT

import typer

from scheduler.cleanup import register_cleanup
from scheduler.error import SchedulerError
from scheduler.initialize import initialize
from scheduler.terminal.app import run


def main() -> None:
    try:
        initialize()
    except SchedulerError as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
