"""Database initialization and removal.

`initialize_database` executes the bundled `sql/schema.sql`, which only
uses `CREATE ... IF NOT EXISTS` and is therefore safe to run on every
start. `delete_database` removes the database file and its rollback
journal.
"""

from __future__ import annotations

import errno
import logging
import sqlite3
from pathlib import Path

from .. import global_config as g

from .connection import execute_script, resolve_db_path, transaction
from .errors import DatabaseLockedError, from_sqlite_error

logger = logging.getLogger(__name__)


def _schema_path() -> Path:
    return g.SQL_DIR / "schema.sql"


def initialize_database(
    db_path: Path | str | None = None,
    *,
    existing_connection: sqlite3.Connection | None = None,
) -> None:
    """Create the logs table (and its index) if they do not exist yet.

    Args:
        db_path: Path to SQLite database file. Defaults to global config.
            Ignored when existing_connection is given.
        existing_connection: Connection to initialize instead of opening a
            new one. It is committed but left open.

    Raises:
        FileNotFoundError: If schema.sql is missing from the package.
        StorageError: If SQL execution fails.

    Logs:
        - DEBUG: "Ensuring database schema" at start.
        - DEBUG: "Database schema ready" on success.
    """
    schema_file = _schema_path()
    if not schema_file.exists():
        msg = f"Schema file not found: {schema_file}"
        raise FileNotFoundError(msg)

    logger.debug("Ensuring database schema")
    schema_sql = schema_file.read_text(encoding="utf-8")

    try:
        with transaction(db_path=db_path, existing_connection=existing_connection) as conn:
            execute_script(conn, schema_sql, description="schema.sql")
    except sqlite3.Error as exc:
        raise from_sqlite_error(exc) from exc
    logger.debug("Database schema ready")


def delete_database(db_path: Path | str | None = None) -> bool:
    """Delete a SQLite database file and its rollback journal.

    Idempotent: a missing database is not an error.

    Args:
        db_path: Path to SQLite database file. Defaults to global config.

    Returns:
        True if a database file was removed, False if none existed.

    Raises:
        DatabaseLockedError: If the file is locked or in use.
        OSError: If deletion fails for other reasons (permissions, etc.).

    Logs:
        - INFO: "Attempting to delete database at {path}" at start.
        - INFO: "Database deleted successfully" on success.
        - ERROR: "Failed to delete {path}" on failure.
    """
    resolved = resolve_db_path(db_path)
    logger.info("Attempting to delete database at %s", resolved)

    if not resolved.exists():
        logger.info("Database does not exist (already deleted)")
        return False

    journal = resolved.with_name(resolved.name + "-journal")
    for file_path in (resolved, journal):
        if not file_path.exists():
            continue
        try:
            file_path.unlink()
            logger.debug("Deleted %s", file_path)
        except OSError as exc:
            logger.error("Failed to delete %s: %s", file_path, exc)
            if exc.errno in (errno.EBUSY, errno.EACCES) or "locked" in str(exc).lower():
                msg = "Database is in use; close all processes using it and retry."
                raise DatabaseLockedError(msg) from exc
            raise

    logger.info("Database deleted successfully")
    return True
