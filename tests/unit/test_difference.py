"""Unit tests for dates.difference — whole-unit differences."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from calendar_utils.core.models import LegacyInstant
from calendar_utils.dates import (
    days_between,
    hours_between,
    minutes_between,
    seconds_between,
    to_instant,
)


class TestDaysBetween:
    def test_dates(self):
        assert days_between(date(2024, 2, 1), date(2024, 3, 1)) == 29
        assert days_between(date(2024, 3, 1), date(2024, 2, 1)) == -29

    def test_same_date(self):
        assert days_between(date(2024, 2, 1), date(2024, 2, 1)) == 0

    def test_datetimes_count_whole_days(self):
        start = datetime(2024, 3, 1, 12, 0)
        assert days_between(start, datetime(2024, 3, 2, 11, 59)) == 0
        assert days_between(start, datetime(2024, 3, 2, 12, 0)) == 1
        assert days_between(start, datetime(2024, 2, 29, 12, 1)) == 0
        assert days_between(start, datetime(2024, 2, 28, 12, 0)) == -2

    def test_instants_use_local_calendar_days(self, host_tz):
        host_tz("UTC0")
        start = to_instant(datetime(2024, 3, 1, 23, 0))
        end = to_instant(datetime(2024, 3, 2, 1, 0))
        assert days_between(start, end) == 1
        assert days_between(end, start) == -1

    def test_instants_same_day(self, host_tz):
        host_tz("UTC0")
        start = to_instant(datetime(2024, 3, 1, 0, 0))
        end = to_instant(datetime(2024, 3, 1, 23, 59))
        assert days_between(start, end) == 0

    @pytest.mark.parametrize(
        "a, b",
        [
            (None, date(2024, 1, 1)),
            (date(2024, 1, 1), None),
            (None, None),
            (None, datetime(2024, 1, 1)),
            (LegacyInstant(0), None),
        ],
    )
    def test_absent_operand_is_zero(self, a, b):
        assert days_between(a, b) == 0

    def test_mixed_kinds_rejected(self):
        with pytest.raises(TypeError, match="Cannot difference"):
            days_between(date(2024, 1, 1), datetime(2024, 1, 2))


class TestSubDayDifferences:
    START = datetime(2024, 3, 1, 10, 0, 0)

    def test_hours(self):
        assert hours_between(self.START, datetime(2024, 3, 2, 9, 59, 59)) == 23
        assert hours_between(self.START, datetime(2024, 3, 1, 8, 30)) == -1

    def test_minutes(self):
        assert minutes_between(self.START, datetime(2024, 3, 1, 11, 30, 59)) == 90
        assert minutes_between(datetime(2024, 3, 1, 11, 30, 59), self.START) == -90

    def test_seconds(self):
        assert seconds_between(self.START, datetime(2024, 3, 1, 10, 1, 1, 999999)) == 61

    @pytest.mark.parametrize("fn", [hours_between, minutes_between, seconds_between])
    def test_absent_operand_is_zero(self, fn):
        assert fn(None, self.START) == 0
        assert fn(self.START, None) == 0

    @pytest.mark.parametrize("fn", [hours_between, minutes_between, seconds_between])
    def test_dates_rejected(self, fn):
        with pytest.raises(TypeError, match="Expected datetime"):
            fn(date(2024, 1, 1), date(2024, 1, 2))
