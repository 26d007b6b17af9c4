"""End-to-end tests for the `y` command."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ylog.cli.main import app
from ylog.logs import LogStore

runner = CliRunner()


def _invoke(*args: str):
    return runner.invoke(app, list(args))


def _entry_ids(sqlite_path: Path) -> list[int]:
    with LogStore(sqlite_path) as store:
        return [entry.id for entry in store.list_all()]


@pytest.mark.integration
class TestAdd:
    def test_add_then_view_by_id(self) -> None:
        result = _invoke("add", "buy milk", "--date", "2024-01-05")
        assert result.exit_code == 0, result.output
        assert "Added log entry 1" in result.output

        result = _invoke("view-by-id", "1")
        assert result.exit_code == 0, result.output
        assert "id: 1" in result.output
        assert "date: 2024-01-05" in result.output
        assert "description: buy milk" in result.output

    def test_add_defaults_to_today(self) -> None:
        _invoke("add", "today's entry")
        result = _invoke("view", date.today().isoformat())
        assert "today's entry" in result.output

    def test_add_with_invalid_date_writes_nothing(self, sqlite_path: Path) -> None:
        result = _invoke("add", "nope", "--date", "2024-13-01")
        assert result.exit_code == 2
        assert "add failed" in result.output
        assert "2024-13-01" in result.output
        assert not sqlite_path.exists()

    def test_add_with_blank_description_fails(self) -> None:
        result = _invoke("add", "   ")
        assert result.exit_code == 2
        assert "Description must not be empty" in result.output

    def test_add_requires_description(self) -> None:
        assert _invoke("add").exit_code != 0

    def test_add_with_undecodable_description_fails(self, sqlite_path: Path) -> None:
        description = b"caf\xe9".decode("utf-8", "surrogateescape")

        result = _invoke("add", description, "--date", "2024-01-05")

        assert result.exit_code == 2
        assert "not valid UTF-8" in result.output
        assert _entry_ids(sqlite_path) == []


@pytest.mark.integration
class TestView:
    def test_view_all_lists_every_entry(self) -> None:
        _invoke("add", "first", "--date", "2024-01-05")
        _invoke("add", "second", "--date", "2024-01-06")

        result = _invoke("view-all")

        assert result.exit_code == 0
        assert result.output.index("first") < result.output.index("second")
        assert "id: 2" in result.output

    def test_view_all_empty(self) -> None:
        result = _invoke("view-all")
        assert result.exit_code == 0
        assert "No log entries." in result.output

    def test_view_by_date_filters(self) -> None:
        _invoke("add", "on the fifth", "--date", "2024-01-05")
        _invoke("add", "on the sixth", "--date", "2024-01-06")

        result = _invoke("view", "2024-01-05")

        assert result.exit_code == 0
        assert "on the fifth" in result.output
        assert "on the sixth" not in result.output

    def test_view_by_date_without_entries(self) -> None:
        result = _invoke("view", "2024-01-05")
        assert result.exit_code == 0
        assert "No log entries for 2024-01-05." in result.output

    def test_view_with_malformed_date(self) -> None:
        result = _invoke("view", "yesterday")
        assert result.exit_code == 2
        assert "expected YYYY-MM-DD" in result.output

    def test_view_by_missing_id_is_not_an_error(self) -> None:
        result = _invoke("view-by-id", "42")
        assert result.exit_code == 0
        assert "No log entry with id 42." in result.output

    def test_view_by_id_rejects_non_integer(self) -> None:
        assert _invoke("view-by-id", "abc").exit_code == 2


@pytest.mark.integration
class TestEdit:
    def test_edit_description_only(self) -> None:
        _invoke("add", "buy milk", "--date", "2024-01-05")

        result = _invoke("edit", "1", "--description", "buy oat milk")

        assert result.exit_code == 0, result.output
        assert "Updated log entry 1" in result.output
        shown = _invoke("view-by-id", "1").output
        assert "description: buy oat milk" in shown
        assert "date: 2024-01-05" in shown

    def test_edit_date_only(self) -> None:
        _invoke("add", "buy milk", "--date", "2024-01-05")

        _invoke("edit", "1", "--date", "2024-02-01")

        shown = _invoke("view-by-id", "1").output
        assert "date: 2024-02-01" in shown
        assert "description: buy milk" in shown

    def test_edit_with_nothing_to_change(self) -> None:
        _invoke("add", "buy milk", "--date", "2024-01-05")

        result = _invoke("edit", "1")

        assert result.exit_code == 2
        assert "Nothing to update" in result.output
        assert "description: buy milk" in _invoke("view-by-id", "1").output

    def test_edit_missing_id(self) -> None:
        result = _invoke("edit", "7", "--description", "x")
        assert result.exit_code == 0
        assert "No log entry with id 7." in result.output

    def test_edit_with_invalid_date(self) -> None:
        _invoke("add", "buy milk", "--date", "2024-01-05")
        result = _invoke("edit", "1", "--date", "2024-02-30")
        assert result.exit_code == 2
        assert "date: 2024-01-05" in _invoke("view-by-id", "1").output


@pytest.mark.integration
class TestDelete:
    def test_delete_removes_entry(self, sqlite_path: Path) -> None:
        _invoke("add", "a", "--date", "2024-01-05")
        _invoke("add", "b", "--date", "2024-01-05")

        result = _invoke("delete", "1")

        assert result.exit_code == 0
        assert "Deleted log entry 1" in result.output
        assert _entry_ids(sqlite_path) == [2]

    def test_delete_missing_id(self) -> None:
        result = _invoke("delete", "3")
        assert result.exit_code == 0
        assert "No log entry with id 3." in result.output


@pytest.mark.integration
class TestIdsOutsideSqliteRange:
    TOO_BIG = str(2**63)

    def test_view_by_id_reports_missing(self) -> None:
        result = _invoke("view-by-id", self.TOO_BIG)
        assert result.exit_code == 0, result.output
        assert f"No log entry with id {self.TOO_BIG}." in result.output

    def test_edit_reports_missing(self) -> None:
        result = _invoke("edit", self.TOO_BIG, "--description", "x")
        assert result.exit_code == 0, result.output
        assert f"No log entry with id {self.TOO_BIG}." in result.output

    def test_delete_reports_missing(self, sqlite_path: Path) -> None:
        _invoke("add", "kept", "--date", "2024-01-05")

        result = _invoke("delete", self.TOO_BIG)

        assert result.exit_code == 0, result.output
        assert f"No log entry with id {self.TOO_BIG}." in result.output
        assert _entry_ids(sqlite_path) == [1]


@pytest.mark.integration
class TestOptions:
    def test_db_path_option_overrides_env(self, project_root: Path, sqlite_path: Path) -> None:
        other = project_root / "other.sqlite"

        result = _invoke("--db-path", str(other), "add", "elsewhere", "--date", "2024-01-05")

        assert result.exit_code == 0
        assert other.exists()
        assert not sqlite_path.exists()

    def test_storage_failure_exits_one(self, project_root: Path) -> None:
        result = _invoke("--db-path", str(project_root / "data"), "view-all")
        assert result.exit_code == 1
        assert "view-all failed" in result.output

    def test_version(self) -> None:
        result = _invoke("--version")
        assert result.exit_code == 0
        assert result.output.startswith("ylog ")


@pytest.mark.integration
class TestDbCommands:
    def test_db_path_prints_resolved_path(self, sqlite_path: Path) -> None:
        result = _invoke("db", "path")
        assert result.exit_code == 0
        assert result.output.strip() == str(sqlite_path)

    def test_db_init_creates_database(self, sqlite_path: Path) -> None:
        result = _invoke("db", "init")
        assert result.exit_code == 0
        assert "(0 entries)" in result.output
        assert sqlite_path.exists()

    def test_db_delete_with_yes(self, sqlite_path: Path) -> None:
        _invoke("add", "a", "--date", "2024-01-05")

        result = _invoke("db", "delete", "--yes")

        assert result.exit_code == 0
        assert "Database deleted" in result.output
        assert not sqlite_path.exists()

    def test_db_delete_aborts_without_confirmation(self, sqlite_path: Path) -> None:
        _invoke("add", "a", "--date", "2024-01-05")

        result = runner.invoke(app, ["db", "delete"], input="n\n")

        assert result.exit_code == 1
        assert sqlite_path.exists()

    def test_db_delete_when_missing(self) -> None:
        result = _invoke("db", "delete", "--yes")
        assert result.exit_code == 0
        assert "Nothing to delete" in result.output
