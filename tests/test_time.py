"""Tests for civil date parsing and formatting."""

from __future__ import annotations

from datetime import date

import pytest

from ylog.errors import InvalidArgumentError
from ylog.utils.time import civil_today, format_civil_date, parse_civil_date


@pytest.mark.unit
class TestParseCivilDate:
    def test_parses_canonical_date(self) -> None:
        assert parse_civil_date("2024-01-05") == date(2024, 1, 5)

    def test_accepts_leap_day(self) -> None:
        assert parse_civil_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "raw",
        [
            "2024-13-01",  # month out of range
            "2024-00-10",
            "2024-02-30",
            "2023-02-29",  # not a leap year
            "20240105",  # compact ISO form
            "2024-1-5",
            " 2024-01-05",
            "2024-01-05T00:00:00",
            "05/01/2024",
            "",
        ],
    )
    def test_rejects_malformed_dates(self, raw: str) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_civil_date(raw)

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError, match="2024-13-01"):
            parse_civil_date("2024-13-01")


@pytest.mark.unit
def test_format_civil_date_is_zero_padded() -> None:
    assert format_civil_date(date(987, 3, 4)) == "0987-03-04"


@pytest.mark.unit
def test_civil_today_matches_local_date() -> None:
    assert civil_today() == date.today()
