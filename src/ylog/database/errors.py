"""Database-specific exception types for the project."""

from __future__ import annotations

import sqlite3
from typing import Any

from ..errors import NotFoundError, YlogError


class StorageError(YlogError):
    """Base exception for database-related errors."""


class IntegrityError(StorageError):
    """Raised when a constraint violation occurs."""


class DatabaseLockedError(StorageError):
    """Raised when database deletion fails because the database is in use."""


def from_sqlite_error(error: sqlite3.Error) -> StorageError:
    """Map a raw sqlite3 error to a project-level StorageError.

    Args:
        error: SQLite exception to convert.

    Returns:
        IntegrityError for constraint violations, StorageError otherwise.
    """
    if isinstance(error, sqlite3.IntegrityError):
        return IntegrityError(str(error))
    return StorageError(str(error))


def ensure_found(row: Any, message: str = "Row not found") -> Any:
    """Raise NotFoundError if a row is missing, otherwise return it.

    Args:
        row: Row result to check (may be None).
        message: Error message to use if row is None.

    Returns:
        The row value if it's not None.

    Raises:
        NotFoundError: If row is None.
    """
    if row is None:
        raise NotFoundError(message)
    return row
