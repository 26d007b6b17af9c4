"""Basic query execution helpers.

These wrap low-level sqlite3 operations with logging and typed return
shapes used by higher-level CRUD helpers.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any

logger = logging.getLogger(__name__)


def execute_query(
    conn: sqlite3.Connection,
    sql: str,
    params: tuple | dict | None = None,
) -> sqlite3.Cursor:
    """Execute a SQL query and return the cursor.

    Args:
        conn: Database connection.
        sql: SQL query string.
        params: Query parameters (tuple or dict). Defaults to empty tuple.

    Returns:
        SQLite cursor with query results.

    Raises:
        sqlite3.Error: If query execution fails.

    Logs:
        - DEBUG: "Executed query: {sql[:80]}" on success.
        - ERROR: "Query execution failed: {exc}" with exception details on failure.
    """
    try:
        cursor = conn.execute(sql, params or ())
        logger.debug("Executed query: %s", sql[:80])
        return cursor
    except sqlite3.Error as exc:
        logger.exception("Query execution failed: %s", exc)
        raise


def fetch_one(
    conn: sqlite3.Connection,
    sql: str,
    params: tuple | dict | None = None,
) -> dict[str, Any] | None:
    """Execute query and return single row as dict, or None if no results."""
    cursor = execute_query(conn, sql, params)
    row = cursor.fetchone()
    if row is None:
        return None
    return dict(row)


def fetch_all(
    conn: sqlite3.Connection,
    sql: str,
    params: tuple | dict | None = None,
) -> list[dict[str, Any]]:
    """Execute query and return all rows as list of dicts.

    Returns:
        List of dictionaries, one per row, with column names as keys.
        Empty list if no rows match.
    """
    cursor = execute_query(conn, sql, params)
    return [dict(row) for row in cursor.fetchall()]


def execute_update(
    conn: sqlite3.Connection,
    sql: str,
    params: tuple | dict | None = None,
) -> int:
    """Execute UPDATE/DELETE and return number of affected rows.

    Logs:
        - DEBUG: "Update affected {rowcount} rows" on success.
    """
    cursor = execute_query(conn, sql, params)
    rowcount = cursor.rowcount
    logger.debug("Update affected %s rows", rowcount)
    return rowcount


def execute_insert(
    conn: sqlite3.Connection,
    sql: str,
    params: tuple | dict | None = None,
) -> int:
    """Execute an INSERT and return the rowid assigned to the new row.

    Args:
        conn: Database connection.
        sql: INSERT statement.
        params: Query parameters (tuple or dict). Defaults to empty tuple.

    Returns:
        Row id of the inserted row.

    Raises:
        sqlite3.Error: If statement execution fails.

    Logs:
        - DEBUG: "Inserted row {rowid}" on success.
    """
    cursor = execute_query(conn, sql, params)
    rowid = cursor.lastrowid
    logger.debug("Inserted row %s", rowid)
    return rowid
