"""Project-level exception types."""

from __future__ import annotations


class YlogError(Exception):
    """Base exception for all ylog errors."""


class InvalidArgumentError(YlogError, ValueError):
    """Raised when user input is malformed or a required field is missing."""


class NotFoundError(YlogError):
    """Raised when a requested log entry cannot be found."""
