"""
Tests for slotman.dates (strict date parsing and weekday rules).
"""

import pytest
from datetime import date, datetime

from slotman.dates import (
    ensure_schedulable,
    format_schedule_date,
    is_schedulable,
    iter_weekdays,
    parse_schedule_date,
)
from slotman.exceptions import SlotError


class TestParseScheduleDate:
    """Tests for parse_schedule_date()."""

    def test_parse_string(self):
        assert parse_schedule_date("2026-03-02") == date(2026, 3, 2)

    def test_parse_date_passthrough(self):
        d = date(2026, 3, 2)
        assert parse_schedule_date(d) is d

    @pytest.mark.parametrize(
        "value",
        ["2026-3-2", "03/02/2026", "2026-03-02T00:00:00", "", "tomorrow", None, 20260302],
    )
    def test_rejects_malformed(self, value):
        with pytest.raises(SlotError) as exc:
            parse_schedule_date(value)

        assert exc.value.code == "INVALID_DATE_FORMAT"

    def test_rejects_impossible_day(self):
        """Well-formed but not on the calendar."""
        with pytest.raises(SlotError) as exc:
            parse_schedule_date("2026-02-30")

        assert exc.value.code == "INVALID_DATE_FORMAT"
        assert exc.value.details["value"] == "2026-02-30"

    def test_rejects_datetime(self):
        with pytest.raises(SlotError) as exc:
            parse_schedule_date(datetime(2026, 3, 2, 9, 0))

        assert exc.value.code == "INVALID_DATE_FORMAT"


class TestWeekdays:
    """Tests for weekday validation."""

    def test_weekdays_schedulable(self):
        # 2026-03-02 is a Monday
        for offset in range(5):
            assert is_schedulable(date(2026, 3, 2 + offset))

    def test_weekend_not_schedulable(self):
        assert not is_schedulable(date(2026, 3, 7))  # Saturday
        assert not is_schedulable(date(2026, 3, 8))  # Sunday

    def test_ensure_schedulable_returns_date(self):
        assert ensure_schedulable(date(2026, 3, 6)) == date(2026, 3, 6)

    def test_ensure_schedulable_weekend_raises(self):
        with pytest.raises(SlotError) as exc:
            ensure_schedulable(date(2026, 3, 7))

        assert exc.value.code == "INVALID_WEEKDAY"
        assert exc.value.message == "Date must be a weekday"
        assert exc.value.details["date"] == "2026-03-07"

    def test_iter_weekdays_skips_weekend(self):
        days = list(iter_weekdays(date(2026, 3, 5), date(2026, 3, 10)))

        assert days == [
            date(2026, 3, 5),
            date(2026, 3, 6),
            date(2026, 3, 9),
            date(2026, 3, 10),
        ]

    def test_iter_weekdays_weekend_only(self):
        assert list(iter_weekdays(date(2026, 3, 7), date(2026, 3, 8))) == []

    def test_iter_weekdays_single_day(self):
        assert list(iter_weekdays(date(2026, 3, 2), date(2026, 3, 2))) == [date(2026, 3, 2)]


class TestFormatScheduleDate:
    """Tests for format_schedule_date()."""

    def test_format(self):
        assert format_schedule_date(date(2026, 3, 2)) == "2026-03-02"

    def test_format_none(self):
        assert format_schedule_date(None) is None
