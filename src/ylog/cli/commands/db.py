"""CLI commands for database management."""

from typing import Annotated

import typer

from ..base import BaseCLI
from ...database import delete_database
from .logs import get_store

db_app = typer.Typer(help="Database management commands.")


class DatabaseCLI(BaseCLI):
    """CLI helpers for database management."""

    def __init__(self) -> None:
        super().__init__("db")

    def init_db(self, ctx: typer.Context) -> str | None:
        """Create the database file and logs table if they are missing.

        User Output:
            - "✓ Database ready at {path} ({n} entries)".
        """
        return self.handle_cli_operation(
            operation="db init",
            op_callable=lambda: self._init_operation(ctx),
        )

    def delete_db(self, ctx: typer.Context) -> str | None:
        """Delete the database file using the CLI operation handler.

        User Output:
            - "Deleting database..." pre-message.
            - "✓ Database deleted" or "Nothing to delete" afterwards.
        """
        return self.handle_cli_operation(
            operation="db delete",
            op_callable=lambda: self._delete_operation(ctx),
            pre_message="Deleting database...",
        )

    def _init_operation(self, ctx: typer.Context) -> str:
        store = get_store(ctx)
        store.initialize()
        return f"✓ Database ready at {store.db_path} ({store.count()} entries)"

    def _delete_operation(self, ctx: typer.Context) -> str:
        store = get_store(ctx)
        store.close()
        if delete_database(db_path=store.db_path):
            return f"✓ Database deleted: {store.db_path}"
        return f"Nothing to delete: {store.db_path} does not exist"


cli = DatabaseCLI()


@db_app.command("init")
def init_command(ctx: typer.Context) -> None:
    """Create the database and logs table if they do not exist."""
    cli.init_db(ctx)


@db_app.command("path")
def path_command(ctx: typer.Context) -> None:
    """Print the location of the database file."""
    typer.echo(str(get_store(ctx).db_path))


@db_app.command("delete")
def delete_command(
    ctx: typer.Context,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Do not ask for confirmation"),
    ] = False,
) -> None:
    """Delete the database file and every log entry in it.

    Asks for confirmation unless --yes is given. Exits with code 1 if the
    database is in use or cannot be removed.
    """
    if not yes:
        db_path = get_store(ctx).db_path
        typer.confirm(f"Delete {db_path} and all log entries?", abort=True)
    cli.delete_db(ctx)


app = db_app
