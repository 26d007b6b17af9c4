"""Generic CRUD helpers built on top of the low-level query helpers.

These functions operate on table names and dict-like row data and are
intended to stay low-level and generic. They do *not* open or close
connections; callers are responsible for providing a connection and
managing transaction boundaries.

Only identifiers are formatted into SQL text, and only after validation.
Every value travels as a bound parameter.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Mapping

from . import queries
from .errors import from_sqlite_error

logger = logging.getLogger(__name__)


def _validate_identifier(name: str) -> None:
    """Validate SQL identifier to prevent injection.

    Checks that identifier contains only alphanumeric characters and
    underscores.

    Args:
        name: SQL identifier (table or column name) to validate.

    Raises:
        ValueError: If identifier contains unsafe characters.
    """
    if not name.replace("_", "").isalnum():
        msg = f"Unsafe SQL identifier: {name!r}"
        raise ValueError(msg)


def _where(filters: Mapping[str, Any]) -> tuple[str, list[Any]]:
    clauses: list[str] = []
    params: list[Any] = []
    for col, value in filters.items():
        _validate_identifier(col)
        clauses.append(f"{col} = ?")
        params.append(value)
    return " AND ".join(clauses), params


def insert(
    conn: sqlite3.Connection,
    table: str,
    data: Mapping[str, Any],
) -> int:
    """Insert a single record into table and return its row id.

    Args:
        conn: Database connection (caller manages transaction).
        table: Table name to insert into.
        data: Column name to value mapping for the new record.

    Returns:
        Row id assigned by SQLite (the INTEGER PRIMARY KEY value).

    Raises:
        ValueError: If table or column names are invalid, or data is empty.
        IntegrityError: If constraint violation occurs.
        StorageError: If database operation fails.

    Logs:
        - DEBUG: "Inserted record {id} into {table}" on success.
    """
    _validate_identifier(table)
    if not data:
        msg = f"Refusing to INSERT an empty record into {table}"
        raise ValueError(msg)

    for col in data:
        _validate_identifier(col)

    columns = ", ".join(data.keys())
    placeholders = ", ".join("?" for _ in data)
    sql = f"INSERT INTO {table} ({columns}) VALUES ({placeholders})"  # noqa: S608

    try:
        row_id = queries.execute_insert(conn, sql, tuple(data.values()))
    except sqlite3.Error as exc:
        raise from_sqlite_error(exc) from exc
    logger.debug("Inserted record %s into %s", row_id, table)
    return row_id


def select(
    conn: sqlite3.Connection,
    table: str,
    filters: Mapping[str, Any] | None = None,
    *,
    order_by: str | None = None,
    limit: int | None = None,
) -> list[dict[str, Any]]:
    """Select rows from table using simple equality filters.

    Builds a SELECT query with WHERE clauses for each filter (ANDed together),
    optional ORDER BY, and optional LIMIT. All identifiers are validated.

    Args:
        conn: Database connection.
        table: Table name to query.
        filters: Column name to value mapping for WHERE clauses.
        order_by: Column name to sort by (optional).
        limit: Maximum number of rows to return (optional).

    Returns:
        List of dictionaries, one per row, with column names as keys.

    Raises:
        ValueError: If table, column names, or order_by are invalid.
        StorageError: If database operation fails.
    """
    _validate_identifier(table)
    sql = f"SELECT * FROM {table}"  # noqa: S608
    params: list[Any] = []

    if filters:
        where_sql, params = _where(filters)
        sql += " WHERE " + where_sql

    if order_by:
        _validate_identifier(order_by)
        sql += f" ORDER BY {order_by}"

    if limit is not None:
        sql += " LIMIT ?"
        params.append(limit)

    try:
        return queries.fetch_all(conn, sql, tuple(params))
    except sqlite3.Error as exc:
        raise from_sqlite_error(exc) from exc


def update(
    conn: sqlite3.Connection,
    table: str,
    filters: Mapping[str, Any],
    values: Mapping[str, Any],
) -> int:
    """Update rows in table matching filters with values.

    The SET clause covers exactly the columns present in `values`, so a
    partial update only touches the fields the caller supplied. Requires at
    least one filter and one value; an empty SET or WHERE would otherwise
    produce a malformed or full-table statement.

    Args:
        conn: Database connection (caller manages transaction).
        table: Table name to update.
        filters: Column name to value mapping for WHERE clauses. Must not
            be empty.
        values: Column name to value mapping for SET clauses. Must not be
            empty.

    Returns:
        Number of rows affected by the update.

    Raises:
        ValueError: If table/column names are invalid or filters/values
            are empty.
        StorageError: If database operation fails.
    """
    _validate_identifier(table)
    if not filters:
        msg = "Refusing to perform UPDATE with no filters"
        raise ValueError(msg)
    if not values:
        msg = "Refusing to perform UPDATE with no values"
        raise ValueError(msg)

    set_clauses: list[str] = []
    params: list[Any] = []
    for col, value in values.items():
        _validate_identifier(col)
        set_clauses.append(f"{col} = ?")
        params.append(value)

    where_sql, where_params = _where(filters)
    params.extend(where_params)

    sql = f"UPDATE {table} SET " + ", ".join(set_clauses)  # noqa: S608
    sql += " WHERE " + where_sql

    try:
        return queries.execute_update(conn, sql, tuple(params))
    except sqlite3.Error as exc:
        raise from_sqlite_error(exc) from exc


def delete(
    conn: sqlite3.Connection,
    table: str,
    filters: Mapping[str, Any],
) -> int:
    """Delete rows in table matching filters.

    Requires at least one filter to prevent accidental full-table deletes.

    Args:
        conn: Database connection (caller manages transaction).
        table: Table name to delete from.
        filters: Column name to value mapping for WHERE clauses. Must not
            be empty.

    Returns:
        Number of rows deleted.

    Raises:
        ValueError: If table/column names are invalid or filters is empty.
        StorageError: If database operation fails.
    """
    _validate_identifier(table)
    if not filters:
        msg = "Refusing to perform DELETE with no filters"
        raise ValueError(msg)

    where_sql, params = _where(filters)
    sql = f"DELETE FROM {table} WHERE " + where_sql  # noqa: S608

    try:
        return queries.execute_update(conn, sql, tuple(params))
    except sqlite3.Error as exc:
        raise from_sqlite_error(exc) from exc
