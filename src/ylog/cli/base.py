from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Sequence
from contextlib import contextmanager
from importlib.metadata import PackageNotFoundError, version
from typing import Any

import typer

from ..errors import InvalidArgumentError, NotFoundError
from ..global_config import PACKAGE_NAME
from ..logs.models import LogEntry

_LOGGING_CONFIGURED = False

EXIT_FAILURE = 1
EXIT_INVALID_ARGUMENT = 2


def get_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "unknown"


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure CLI-wide logging.

    The root handler is installed only on the first call; later calls
    just adjust the package logger level (e.g. for --verbose).

    Args:
        level: Logging level for the package loggers (defaults to WARNING).

    Side Effects:
        - Configures Python logging module globally on first call.
    """
    global _LOGGING_CONFIGURED
    if not _LOGGING_CONFIGURED:
        logging.basicConfig(
            level=logging.WARNING,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        _LOGGING_CONFIGURED = True
    logging.getLogger(PACKAGE_NAME).setLevel(level)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared CLI configuration."""
    return logging.getLogger(name)


@contextmanager
def handle_errors(
    operation: str,
    *,
    logger: logging.Logger | None = None,
) -> Generator[None, None, None]:
    """Provide consistent exception handling for CLI operations.

    - NotFoundError is a normal outcome: its message is printed in yellow
      and the command still exits 0.
    - InvalidArgumentError prints the problem and exits 2.
    - Anything else is logged with its traceback and exits 1.

    typer.Exit passes through untouched.

    Args:
        operation: Human-readable operation name for error messages.
        logger: Logger instance. Defaults to module logger if None.

    Raises:
        typer.Exit: With EXIT_INVALID_ARGUMENT or EXIT_FAILURE.

    User Output:
        - "✗ {operation} failed: {exc}" in red on failure.
    """
    logger = logger or get_logger(__name__)
    try:
        yield
    except typer.Exit:
        raise
    except NotFoundError as exc:
        logger.debug("%s: %s", operation, exc)
        typer.secho(str(exc), fg=typer.colors.YELLOW)
    except InvalidArgumentError as exc:
        logger.debug("Invalid argument for %s: %s", operation, exc)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(EXIT_INVALID_ARGUMENT) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(EXIT_FAILURE) from exc


def format_entry(entry: LogEntry) -> str:
    """Render one entry as an id/date/description block."""
    return "\n".join(f"{key}: {value}" for key, value in entry.to_row().items())


def format_entries(entries: Sequence[LogEntry], *, empty_message: str) -> str:
    """Render entries as blocks separated by blank lines."""
    if not entries:
        return empty_message
    return "\n\n".join(format_entry(entry) for entry in entries)


class BaseCLI:
    """Utility base class for CLI command groups."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        self.logger = get_logger(__name__)

    def handle_cli_operation(
        self,
        *,
        operation: str,
        op_callable: Callable[[], str | None],
        pre_message: str | None = None,
    ) -> Any:
        """Run an operation with consistent logging, output, and errors.

        Args:
            operation: Human-readable operation name for error handling.
            op_callable: Callable that performs the operation and returns
                the text to print (or None to print nothing).
            pre_message: Optional message to display before operation starts.

        Returns:
            Result from op_callable, or None if it raised NotFoundError.

        User Output:
            - Prints pre_message and the returned text via typer.echo().
            - Error messages handled by handle_errors context manager.
        """
        if pre_message:
            typer.echo(pre_message)

        result = None
        with handle_errors(operation, logger=self.logger):
            result = op_callable()

        if result is not None:
            typer.echo(result)
        return result
