"""Log entry model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from ..utils.time import format_civil_date


@dataclass(frozen=True)
class LogEntry:
    """One journal record.

    Attributes:
        id: Store-assigned identifier; never changes once assigned.
        date: Calendar date of the entry.
        description: Entry text, kept verbatim.
    """

    id: int
    date: date
    description: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> LogEntry:
        """Build an entry from a `logs` row (date stored as YYYY-MM-DD)."""
        return cls(
            id=int(row["id"]),
            date=date.fromisoformat(row["date"]),
            description=row["description"],
        )

    def to_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": format_civil_date(self.date),
            "description": self.description,
        }
