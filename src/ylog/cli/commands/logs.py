"""CLI commands for adding, viewing, editing and deleting log entries."""

from __future__ import annotations

from typing import Annotated

import typer

from ...database.errors import ensure_found
from ...errors import NotFoundError
from ...logs.store import LogStore
from ...utils.time import parse_civil_date
from ..base import BaseCLI, format_entries, format_entry

cli = BaseCLI("logs")


def get_store(ctx: typer.Context) -> LogStore:
    """Return the LogStore created by the root callback."""
    return ctx.find_object(LogStore)


def add_command(
    ctx: typer.Context,
    description: Annotated[str, typer.Argument(help="What happened")],
    date: Annotated[
        str | None,
        typer.Option("--date", "-d", help="Entry date as YYYY-MM-DD"),
    ] = None,
) -> None:
    """Add a new log entry (dated today unless --date is given)."""

    def _add() -> str:
        entry_date = parse_civil_date(date) if date is not None else None
        entry_id = get_store(ctx).create(description, entry_date)
        return f"✓ Added log entry {entry_id}"

    cli.handle_cli_operation(operation="add", op_callable=_add)


def view_all_command(ctx: typer.Context) -> None:
    """Show every log entry."""

    def _view_all() -> str:
        entries = get_store(ctx).list_all()
        return format_entries(entries, empty_message="No log entries.")

    cli.handle_cli_operation(operation="view-all", op_callable=_view_all)


def view_command(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Date as YYYY-MM-DD")],
) -> None:
    """Show the log entries for one date."""

    def _view() -> str:
        entry_date = parse_civil_date(date)
        entries = get_store(ctx).list_by_date(entry_date)
        return format_entries(entries, empty_message=f"No log entries for {date}.")

    cli.handle_cli_operation(operation="view", op_callable=_view)


def view_by_id_command(
    ctx: typer.Context,
    entry_id: Annotated[int, typer.Argument(metavar="ID", help="Entry id")],
) -> None:
    """Show a single log entry."""

    def _view_by_id() -> str:
        entry = ensure_found(
            get_store(ctx).get_by_id(entry_id),
            f"No log entry with id {entry_id}.",
        )
        return format_entry(entry)

    cli.handle_cli_operation(operation="view-by-id", op_callable=_view_by_id)


def edit_command(
    ctx: typer.Context,
    entry_id: Annotated[int, typer.Argument(metavar="ID", help="Entry id")],
    date: Annotated[
        str | None,
        typer.Option("--date", "-d", help="Entry date as YYYY-MM-DD"),
    ] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", "-m", help="New description"),
    ] = None,
) -> None:
    """Change the date and/or description of a log entry."""

    def _edit() -> str:
        entry_date = parse_civil_date(date) if date is not None else None
        affected = get_store(ctx).update(
            entry_id,
            entry_date=entry_date,
            description=description,
        )
        if not affected:
            raise NotFoundError(f"No log entry with id {entry_id}.")
        return f"✓ Updated log entry {entry_id}"

    cli.handle_cli_operation(operation="edit", op_callable=_edit)


def delete_command(
    ctx: typer.Context,
    entry_id: Annotated[int, typer.Argument(metavar="ID", help="Entry id")],
) -> None:
    """Delete a log entry."""

    def _delete() -> str:
        if not get_store(ctx).delete(entry_id):
            raise NotFoundError(f"No log entry with id {entry_id}.")
        return f"✓ Deleted log entry {entry_id}"

    cli.handle_cli_operation(operation="delete", op_callable=_delete)
