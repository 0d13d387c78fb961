# SPDX-License-Identifier: MIT

import logging
import sqlite3
from pathlib import Path
from typing import Any, Optional

from scheduler import configuration
from scheduler.error import UnknownOrdinalError
from scheduler.model.criteria import Criteria
from scheduler.model.event import Event, EventFields
from scheduler.query.criteria import build_predicate
from scheduler.repository.database import connect, storage_errors
from scheduler.template.criteria import get_criteria_template
from scheduler.template.event import DEFAULT_NOTE

logger = logging.getLogger(__name__)

SELECT_EVENTS = "SELECT date, time, name, note, complete FROM events"

# Column order of SET clauses in an update
UPDATABLE_FIELDS = ("date", "time", "name", "note", "complete")


class EventRepository:
    """
    SQLite-backed storage for events.

    The connection is opened on first use against the configured database
    file unless open() bound the repository to another one. Every mutating
    call commits before returning.
    """

    def __init__(self, database_path: Optional[str | Path] = None) -> None:
        self._database_path = database_path
        self._connection: Optional[sqlite3.Connection] = None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            self.__connect()
        if self._connection is None:
            raise ValueError()
        return self._connection

    def __connect(self) -> None:
        database_path = self._database_path or configuration.DATA_DATABASE_PATH
        self._connection = connect(database_path)

    def open(self, database_path: str | Path) -> None:
        self.close()
        self._database_path = database_path

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def __fetch(self, statement: str, parameters: list[Any]) -> list[Event]:
        with storage_errors():
            rows = self.connection.execute(statement, parameters).fetchall()
        return [self.__row_to_event(row) for row in rows]

    def __execute(self, statement: str, parameters: list[Any]) -> int:
        with storage_errors(), self.connection:
            cursor = self.connection.execute(statement, parameters)
        logger.debug("%s affected %d row(s)", statement.split(" ")[0], cursor.rowcount)
        return cursor.rowcount

    @staticmethod
    def __row_to_event(row: sqlite3.Row) -> Event:
        return {
            "date": row["date"],
            "time": row["time"],
            "name": row["name"],
            "note": row["note"],
            "complete": bool(row["complete"]),
        }

    def list_events(self) -> list[Event]:
        return self.__fetch(SELECT_EVENTS, [])

    def query_events(self, criteria: Criteria) -> list[Event]:
        predicate = build_predicate(criteria)
        if predicate is None:
            return self.list_events()
        where, parameters = predicate.to_sql()
        return self.__fetch(f"{SELECT_EVENTS} WHERE {where}", parameters)

    def count_events(self) -> int:
        with storage_errors():
            row = self.connection.execute("SELECT COUNT(*) FROM events").fetchone()
        return int(row[0])

    def get_event_by_ordinal(self, ordinal: int) -> Event:
        """Resolve an id printed by the unfiltered listing against storage order."""
        events = self.list_events()
        if ordinal < 1 or ordinal > len(events):
            raise UnknownOrdinalError(
                f"no event with id {ordinal} ({len(events)} event(s) listed)"
            )
        return events[ordinal - 1]

    def save_new_event(self, event: Event) -> None:
        note = event["note"] if event["note"] is not None else DEFAULT_NOTE
        self.__execute(
            "INSERT INTO events (date, time, name, note, complete) VALUES (?, ?, ?, ?, ?)",
            [
                event["date"],
                event["time"],
                event["name"],
                note,
                1 if event["complete"] else 0,
            ],
        )

    def update_events(self, criteria: Criteria, fields: EventFields) -> int:
        predicate = build_predicate(criteria)
        if predicate is None:
            logger.debug("update skipped: no criteria given")
            return 0

        assignments: list[str] = []
        parameters: list[Any] = []
        for field in UPDATABLE_FIELDS:
            if field not in fields:
                continue
            value = fields[field]  # type: ignore[literal-required]
            if field == "complete":
                value = 1 if value else 0
            assignments.append(f"{field} = ?")
            parameters.append(value)
        if len(assignments) == 0:
            return 0

        where, where_parameters = predicate.to_sql()
        return self.__execute(
            f"UPDATE events SET {', '.join(assignments)} WHERE {where}",
            parameters + where_parameters,
        )

    def complete_events(self, criteria: Criteria) -> int:
        return self.update_events(criteria, {"complete": True})

    def delete_events(self, criteria: Criteria) -> int:
        predicate = build_predicate(criteria)
        if predicate is None:
            logger.debug("delete skipped: no criteria given")
            return 0
        where, parameters = predicate.to_sql()
        return self.__execute(f"DELETE FROM events WHERE {where}", parameters)

    def clear_completed(self, date: str) -> int:
        return self.delete_events(get_criteria_template(date=date, complete=True))

    def complete_all(self, date: str) -> int:
        return self.complete_events(get_criteria_template(date=date))

    def delete_all(self, date: str) -> int:
        return self.delete_events(get_criteria_template(date=date))


EVENT_REPO = EventRepository()
