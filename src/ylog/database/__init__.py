"""Public interface for the database package.

This module exposes the main primitives needed by the rest of the
project: connection helpers, initialization entrypoints, generic CRUD
utilities and the storage error types.
"""

from .connection import get_connection, resolve_db_path, transaction
from .crud import delete, insert, select, update
from .errors import (
    DatabaseLockedError,
    IntegrityError,
    StorageError,
    ensure_found,
    from_sqlite_error,
)
from .init import delete_database, initialize_database

__all__ = [
    "get_connection",
    "resolve_db_path",
    "transaction",
    "initialize_database",
    "delete_database",
    "StorageError",
    "IntegrityError",
    "DatabaseLockedError",
    "ensure_found",
    "from_sqlite_error",
    "insert",
    "select",
    "update",
    "delete",
]
