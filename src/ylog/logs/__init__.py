"""Log entries and the store that persists them."""

from .models import LogEntry
from .store import LogStore

__all__ = ["LogEntry", "LogStore"]
