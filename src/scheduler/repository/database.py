# SPDX-License-Identifier: MIT

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from scheduler.error import (
    DuplicateNameError,
    QueryFailureError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

EVENTS_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS events "
    "(date TEXT, time TEXT, name TEXT UNIQUE, note TEXT, complete INTEGER)"
)


@contextmanager
def storage_errors() -> Iterator[None]:
    """Re-raise sqlite3 failures as scheduler errors, chaining the original."""
    try:
        yield
    except sqlite3.IntegrityError as e:
        # name is the only constrained column
        raise DuplicateNameError(f"an event with that name already exists ({e})") from e
    except sqlite3.Error as e:
        raise QueryFailureError(str(e)) from e


def connect(database_path: str | Path) -> sqlite3.Connection:
    """Open the database file, creating its directory and table if absent."""
    try:
        if str(database_path) != MEMORY_DATABASE:
            Path(database_path).parent.mkdir(parents=True, exist_ok=True)
        connection = sqlite3.connect(database_path)
    except (OSError, sqlite3.Error) as e:
        raise StorageUnavailableError(
            f"cannot open database at {database_path}: {e}"
        ) from e

    connection.row_factory = sqlite3.Row
    try:
        with storage_errors(), connection:
            connection.execute(EVENTS_SCHEMA)
    except QueryFailureError as e:
        connection.close()
        raise StorageUnavailableError(
            f"cannot prepare database at {database_path}: {e}"
        ) from e

    logger.debug("Events table initialized at %s", database_path)
    return connection
