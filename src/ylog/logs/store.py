"""Persistence for log entries.

`LogStore` owns the single `logs` table. It holds one SQLite connection,
opened on first use and kept for the lifetime of the store, and maps each
operation onto one parameterized statement via the generic CRUD helpers.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import date
from pathlib import Path
from typing import Any

from .. import global_config as g
from ..database import crud, queries
from ..database.connection import get_connection, resolve_db_path, transaction
from ..database.errors import StorageError, from_sqlite_error
from ..database.init import initialize_database
from ..errors import InvalidArgumentError
from ..utils.time import civil_today, format_civil_date
from .models import LogEntry

logger = logging.getLogger(__name__)

TABLE = g.LOGS_TABLE

# SQLite INTEGER is a signed 64-bit value; no row can have an id outside it.
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def _require_description(description: str) -> str:
    if not isinstance(description, str) or not description.strip():
        raise InvalidArgumentError("Description must not be empty")
    try:
        description.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidArgumentError(f"Description is not valid UTF-8: {exc.reason}") from exc
    return description


def _storable_id(entry_id: int) -> bool:
    return SQLITE_INT_MIN <= entry_id <= SQLITE_INT_MAX


class LogStore:
    """CRUD operations over the `logs` table.

    Args:
        db_path: Path to the SQLite file. Defaults to
            global_config.DEFAULT_DB_PATH.

    Entries are always returned in id order, which is insertion order.
    """

    def __init__(self, db_path: Path | str | None = None) -> None:
        self.db_path = resolve_db_path(db_path)
        self._conn: sqlite3.Connection | None = None

    def __enter__(self) -> LogStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def connection(self) -> sqlite3.Connection:
        """The open connection, created (with schema) on first access.

        Raises:
            StorageError: If the database cannot be opened or initialized.
        """
        if self._conn is None:
            try:
                conn = get_connection(self.db_path)
            except (sqlite3.Error, OSError) as exc:
                msg = f"Cannot open database at {self.db_path}: {exc}"
                raise StorageError(msg) from exc
            try:
                initialize_database(existing_connection=conn)
            except Exception:
                conn.close()
                raise
            self._conn = conn
        return self._conn

    def initialize(self) -> None:
        """Open the database, creating the file and table if needed."""
        _ = self.connection

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug("Closed log store at %s", self.db_path)

    def create(self, description: str, entry_date: date | None = None) -> int:
        """Insert a new entry and return its id.

        Args:
            description: Entry text; must contain a non-whitespace character.
            entry_date: Calendar date; defaults to today (local time).

        Returns:
            The id assigned by the store.

        Raises:
            InvalidArgumentError: If description is blank or not valid UTF-8.
            StorageError: If the write fails.
        """
        _require_description(description)
        entry_date = entry_date or civil_today()
        row = {"date": format_civil_date(entry_date), "description": description}
        with transaction(existing_connection=self.connection) as conn:
            entry_id = crud.insert(conn, TABLE, row)
        logger.info("Created log entry %s for %s", entry_id, row["date"])
        return entry_id

    def list_all(self) -> list[LogEntry]:
        rows = crud.select(self.connection, TABLE, order_by="id")
        return [LogEntry.from_row(row) for row in rows]

    def list_by_date(self, entry_date: date) -> list[LogEntry]:
        """Return entries whose date is exactly `entry_date`."""
        rows = crud.select(
            self.connection,
            TABLE,
            {"date": format_civil_date(entry_date)},
            order_by="id",
        )
        return [LogEntry.from_row(row) for row in rows]

    def get_by_id(self, entry_id: int) -> LogEntry | None:
        """Return the entry with `entry_id`, or None if there is none."""
        if not _storable_id(entry_id):
            return None
        sql = f"SELECT id, date, description FROM {TABLE} WHERE id = ?"  # noqa: S608
        try:
            row = queries.fetch_one(self.connection, sql, (entry_id,))
        except sqlite3.Error as exc:
            raise from_sqlite_error(exc) from exc
        if row is None:
            return None
        return LogEntry.from_row(row)

    def update(
        self,
        entry_id: int,
        *,
        entry_date: date | None = None,
        description: str | None = None,
    ) -> int:
        """Change the date and/or description of an entry.

        Only the fields that are supplied are written.

        Returns:
            Number of rows affected (0 if no entry has `entry_id`).

        Raises:
            InvalidArgumentError: If neither field is supplied, or the new
                description is blank or not valid UTF-8.
            StorageError: If the write fails.
        """
        values: dict[str, Any] = {}
        if entry_date is not None:
            values["date"] = format_civil_date(entry_date)
        if description is not None:
            values["description"] = _require_description(description)
        if not values:
            raise InvalidArgumentError("Nothing to update: supply a date and/or a description")
        if not _storable_id(entry_id):
            return 0

        with transaction(existing_connection=self.connection) as conn:
            affected = crud.update(conn, TABLE, {"id": entry_id}, values)
        logger.info("Updated log entry %s (%s): %d row(s)", entry_id, ", ".join(values), affected)
        return affected

    def delete(self, entry_id: int) -> int:
        """Remove an entry. Returns rows affected (0 if absent)."""
        if not _storable_id(entry_id):
            return 0
        with transaction(existing_connection=self.connection) as conn:
            affected = crud.delete(conn, TABLE, {"id": entry_id})
        logger.info("Deleted log entry %s: %d row(s)", entry_id, affected)
        return affected

    def count(self) -> int:
        try:
            row = self.connection.execute(f"SELECT COUNT(*) FROM {TABLE}").fetchone()  # noqa: S608
        except sqlite3.Error as exc:
            raise from_sqlite_error(exc) from exc
        return int(row[0])
