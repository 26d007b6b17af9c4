"""Utility modules.

This package provides shared utilities used across the codebase.
"""

from .time import (
    CIVIL_DATE_PATTERN,
    civil_today,
    format_civil_date,
    parse_civil_date,
)

__all__ = [
    "CIVIL_DATE_PATTERN",
    "civil_today",
    "format_civil_date",
    "parse_civil_date",
]
