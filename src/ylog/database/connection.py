"""Database connection helpers.

This module provides a small, synchronous API for obtaining SQLite
connections configured for a local, single-user logbook file.
"""

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterator
from pathlib import Path

from .. import global_config as g

logger = logging.getLogger(__name__)


def resolve_db_path(db_path: Path | str | None = None) -> Path:
    """Return the database path to use, falling back to the configured default.

    Args:
        db_path: Explicit database path, or None for
            global_config.DEFAULT_DB_PATH.

    Returns:
        Database path with `~` expanded.
    """
    resolved = db_path or g.DEFAULT_DB_PATH
    return Path(resolved).expanduser()


def _ensure_parent_dir(db_path: Path) -> None:
    db_path.parent.mkdir(parents=True, exist_ok=True)


def _configure_connection(conn: sqlite3.Connection) -> None:
    """Apply the standard row factory to a new connection.

    Args:
        conn: SQLite connection to configure.

    Side Effects:
        - Sets row_factory to sqlite3.Row for dict-like access.
    """
    conn.row_factory = sqlite3.Row
    # Default DELETE journal mode: single user, no -wal/-shm files wanted.


def get_connection(db_path: Path | str | None = None) -> sqlite3.Connection:
    """Return a configured SQLite connection.

    Creates a new SQLite connection with sqlite3.Row rows. Ensures the
    parent directory exists before creating the database file.

    Args:
        db_path: Path to SQLite database file. Defaults to
            global_config.DEFAULT_DB_PATH.

    Returns:
        Configured SQLite connection ready for use.

    Raises:
        sqlite3.Error: If the database file cannot be opened.
        OSError: If the parent directory cannot be created.

    Logs:
        - DEBUG: "Opening SQLite database at {path}" when creating connection.
    """
    resolved = resolve_db_path(db_path)
    _ensure_parent_dir(resolved)
    logger.debug("Opening SQLite database at %s", resolved)
    conn = sqlite3.connect(str(resolved))
    _configure_connection(conn)
    return conn


@contextlib.contextmanager
def transaction(
    db_path: Path | str | None = None,
    existing_connection: sqlite3.Connection | None = None,
) -> Iterator[sqlite3.Connection]:
    """Context manager for a transactional connection block.

    Commits on success and rolls back on error. If an existing connection
    is provided, it is reused and not closed. Otherwise, creates and closes
    a new connection.

    Args:
        db_path: Path to database file (only used if existing_connection
            is None). Defaults to global config.
        existing_connection: Existing connection to reuse.

    Yields:
        SQLite connection ready for database operations.

    Logs:
        - DEBUG: "Beginning transaction" at start
        - DEBUG: "Transaction committed" on success
        - ERROR: "Transaction rolled back due to error" on failure
        - DEBUG: "Connection closed" when closing owned connection.
    """
    owns_connection = existing_connection is None
    conn = existing_connection or get_connection(db_path=db_path)

    try:
        logger.debug("Beginning transaction")
        yield conn
        conn.commit()
        logger.debug("Transaction committed")
    except Exception:
        logger.exception("Transaction rolled back due to error")
        conn.rollback()
        raise
    finally:
        if owns_connection:
            conn.close()
            logger.debug("Connection closed")


def execute_script(conn: sqlite3.Connection, sql: str, *, description: str) -> None:
    """Execute a multi-statement SQL script with logging.

    Args:
        conn: Database connection to execute script on.
        sql: Multi-statement SQL script to execute.
        description: Human-readable description for logging purposes.

    Raises:
        sqlite3.Error: If script execution fails.

    Logs:
        - INFO: "Executing SQL script: {description}" before execution.
        - ERROR: "Failed while executing SQL script: {description}" on failure.
    """
    logger.info("Executing SQL script: %s", description)
    try:
        conn.executescript(sql)
    except sqlite3.Error:
        logger.exception("Failed while executing SQL script: %s", description)
        raise
