"""Civil date utilities.

Log entries carry a civil date only (no time, no zone). At rest the date
is always the canonical string YYYY-MM-DD; in memory it is a
`datetime.date`.
"""

from __future__ import annotations

import re
from datetime import date

from ..errors import InvalidArgumentError

# Canonical civil date format: exactly 10 characters, YYYY-MM-DD
CIVIL_DATE_LENGTH = 10
CIVIL_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_civil_date(s: str) -> date:
    """Parse a user-supplied YYYY-MM-DD string into a date.

    `date.fromisoformat` alone also accepts compact forms like 20240105,
    so the shape is checked first.

    Args:
        s: String to parse.

    Returns:
        The calendar date.

    Raises:
        InvalidArgumentError: If the string is not YYYY-MM-DD or names a
            day that does not exist (e.g. 2024-13-01, 2023-02-29).
    """
    if not isinstance(s, str):
        raise InvalidArgumentError(f"Expected string, got {type(s).__name__}: {s}")

    if len(s) != CIVIL_DATE_LENGTH or not CIVIL_DATE_PATTERN.match(s):
        raise InvalidArgumentError(f"Invalid date {s!r} (expected YYYY-MM-DD)")

    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid date {s!r}: {e}") from e


def format_civil_date(d: date) -> str:
    """Format a date as canonical YYYY-MM-DD."""
    return d.isoformat()


def civil_today() -> date:
    """Return today's date in the local timezone."""
    return date.today()
