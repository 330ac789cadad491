"""Tests for day identifiers and day arithmetic."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from consisttracker.services.dates import (
    day_difference,
    day_id,
    is_day_id,
    parse_day,
    resolve_today,
    subtract_days,
    today_id,
)


class TestDayId:
    def test_same_local_day_gives_same_id(self):
        morning = datetime(2024, 3, 15, 0, 0, 1)
        night = datetime(2024, 3, 15, 23, 59, 59)
        assert day_id(morning) == day_id(night) == "2024-03-15"

    def test_accepts_plain_dates(self):
        assert day_id(date(2024, 1, 5)) == "2024-01-05"

    def test_aware_datetime_uses_host_timezone(self):
        moment = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)
        assert day_id(moment) == moment.astimezone().date().isoformat()

    def test_today_matches_clock(self):
        assert today_id() == date.today().isoformat()


class TestArithmetic:
    @pytest.mark.parametrize(
        "day, n, expected",
        [
            ("2024-03-15", 0, "2024-03-15"),
            ("2024-03-01", 1, "2024-02-29"),
            ("2023-03-01", 1, "2023-02-28"),
            ("2024-01-01", 1, "2023-12-31"),
            ("2024-01-10", 365, "2023-01-10"),
            ("2024-03-15", -1, "2024-03-16"),
        ],
    )
    def test_subtract_days_crosses_boundaries(self, day, n, expected):
        assert subtract_days(day, n) == expected

    def test_subtract_days_pins_to_calendar_range(self):
        assert subtract_days("2024-03-15", 800_000) == "0001-01-01"
        assert subtract_days("2024-03-15", 10**10) == "0001-01-01"
        assert subtract_days("2024-03-15", -(10**7)) == "9999-12-31"
        assert is_day_id(subtract_days("2024-03-15", 800_000))

    def test_day_difference_signs(self):
        assert day_difference("2024-03-15", "2024-03-14") == 1
        assert day_difference("2024-03-14", "2024-03-15") == -1
        assert day_difference("2024-03-15", "2024-03-15") == 0

    def test_day_difference_across_dst_change(self):
        # US and EU clocks change in late March; calendar maths is unaffected
        assert day_difference("2024-04-01", "2024-03-25") == 7

    def test_parse_day_round_trips_with_day_id(self):
        assert parse_day("2024-02-29") == date(2024, 2, 29)
        assert day_id(parse_day("2024-02-29") + timedelta(days=1)) == "2024-03-01"


class TestValidation:
    @pytest.mark.parametrize("value", ["2024-03-15", "2000-02-29"])
    def test_valid_ids(self, value):
        assert is_day_id(value)

    @pytest.mark.parametrize("value", ["2024-3-15", "2023-02-29", "15/03/2024", "", None, 20240315])
    def test_invalid_ids(self, value):
        assert not is_day_id(value)

    def test_resolve_today_normalizes_overrides(self):
        assert resolve_today("2024-03-15") == "2024-03-15"
        assert resolve_today(date(2024, 3, 15)) == "2024-03-15"
        assert resolve_today(datetime(2024, 3, 15, 18, 30)) == "2024-03-15"
        assert resolve_today() == today_id()
