from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from pathlib import Path

import pytest

from ylog.database import initialize_database
from ylog.global_config import DB_PATH_ENV_VAR
from ylog.logs import LogStore


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """
    A dedicated temp root directory for each test.
    All filesystem writes in tests should be under this root (or tmp_path directly).
    """
    root = tmp_path / "proj"
    (root / "data" / "out").mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def chdir_to_project_root(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Automatically change working directory to project_root for all tests.
    This ensures relative-path operations go into the temp directory by default.
    """
    monkeypatch.chdir(project_root)


@pytest.fixture
def sqlite_path(project_root: Path) -> Path:
    """
    On-disk SQLite DB under the temp project root (more realistic than :memory:).
    """
    return project_root / "data" / "out" / "test.sqlite"


@pytest.fixture(autouse=True)
def db_path_env(sqlite_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Point the CLI at the temp database so no test ever opens ~/.ylog.
    """
    monkeypatch.setenv(DB_PATH_ENV_VAR, str(sqlite_path))


@pytest.fixture
def db_conn(sqlite_path: Path, project_root: Path) -> Iterator[sqlite3.Connection]:
    """
    A connection to an initialized database that is always closed after each test.

    Path assertion: DB must be under project_root (prevents touching real DBs).
    """
    try:
        sqlite_path.resolve().relative_to(project_root.resolve())
    except ValueError:
        raise AssertionError(
            f"SQLite path {sqlite_path} is not under project_root {project_root}. "
            "This prevents accidental writes to real databases."
        )

    conn = sqlite3.connect(sqlite_path)
    conn.row_factory = sqlite3.Row
    try:
        initialize_database(existing_connection=conn)
        yield conn
    finally:
        conn.close()


@pytest.fixture
def store(sqlite_path: Path) -> Iterator[LogStore]:
    """A LogStore on the temp database, closed after the test."""
    with LogStore(sqlite_path) as log_store:
        yield log_store
