from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from ..global_config import DB_PATH_ENV_VAR
from ..logs.store import LogStore
from .base import configure_logging, get_version
from .commands import logs
from .commands.db import app as db_app

app = typer.Typer(
    help="Personal logbook: dated text entries in a local SQLite file.",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)

app.add_typer(db_app, name="db")

app.command("add")(logs.add_command)
app.command("view-all")(logs.view_all_command)
app.command("view")(logs.view_command)
app.command("view-by-id")(logs.view_by_id_command)
app.command("edit")(logs.edit_command)
app.command("delete")(logs.delete_command)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ylog {get_version()}")
        raise typer.Exit()


@app.callback()
def root(
    ctx: typer.Context,
    db_path: Annotated[
        Path | None,
        typer.Option(
            "--db-path",
            envvar=DB_PATH_ENV_VAR,
            help="Path to SQLite database file (defaults to ~/.ylog/ylog.sqlite)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show debug logging"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the installed version and exit",
        ),
    ] = False,
) -> None:
    """Open the log store once and hand it to the invoked command."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    store = LogStore(db_path)
    ctx.obj = store
    ctx.call_on_close(store.close)


def main() -> None:
    """Main entry point for package CLI.

    Side Effects:
        - Processes CLI arguments and executes commands.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()
