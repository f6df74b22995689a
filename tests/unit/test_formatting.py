"""Unit tests for dates.formatting — current-moment accessors and format()."""

from __future__ import annotations

import re
from datetime import date, datetime, time

import pytest

from calendar_utils.core.errors import InvalidFormatPattern
from calendar_utils.core.models import LegacyInstant
from calendar_utils.dates import (
    current_date,
    current_datetime,
    current_time,
    format,
)


class TestCurrentMoment:
    def test_current_date_from_clock(self, fixed_clock):
        assert current_date(fixed_clock) == "2024-03-01"

    def test_current_datetime_from_clock(self, fixed_clock):
        assert current_datetime(fixed_clock) == "2024-03-01 13:05:09"

    def test_current_time_from_clock(self, fixed_clock):
        assert current_time(fixed_clock) == "13:05:09"

    def test_reads_clock_on_every_call(self, fixed_clock):
        first = current_time(fixed_clock)
        fixed_clock.advance_ms(61_000)
        assert current_time(fixed_clock) != first
        assert current_time(fixed_clock) == "13:06:10"

    def test_wall_clock_defaults(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", current_date())
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", current_datetime())
        assert re.fullmatch(r"\d{2}:\d{2}:\d{2}", current_time())


class TestFormatDefaults:
    def test_date(self, leap_day):
        assert format(leap_day) == "2024-02-29"

    def test_datetime(self, sample_datetime):
        assert format(sample_datetime) == "2024-03-01 13:05:09"

    def test_datetime_drops_microseconds(self):
        assert format(datetime(2024, 3, 1, 1, 2, 3, 999999)) == "2024-03-01 01:02:03"

    def test_time(self):
        assert format(time(7, 8, 9)) == "07:08:09"

    @pytest.mark.parametrize("pattern", [None, ""])
    def test_missing_pattern_falls_back_to_default(self, leap_day, sample_datetime, pattern):
        assert format(leap_day, pattern) == "2024-02-29"
        assert format(sample_datetime, pattern) == "2024-03-01 13:05:09"
        assert format(time(7, 8, 9), pattern) == "07:08:09"


class TestFormatExplicit:
    def test_date(self, leap_day):
        assert format(leap_day, "dd/MM/yyyy") == "29/02/2024"

    def test_datetime(self, sample_datetime):
        assert format(sample_datetime, "yyyyMMddHHmmss") == "20240301130509"

    def test_time(self):
        assert format(time(18, 30), "h:mm a") == "6:30 PM"

    def test_malformed_pattern_raises(self, leap_day):
        with pytest.raises(InvalidFormatPattern):
            format(leap_day, "yyyy-MM-dd Q")

    def test_time_fields_on_date_raise(self, leap_day):
        with pytest.raises(InvalidFormatPattern):
            format(leap_day, "yyyy-MM-dd HH:mm")


class TestFormatAbsent:
    @pytest.mark.parametrize("pattern", [None, "", "yyyy", "not a [pattern"])
    def test_none_gives_none(self, pattern):
        assert format(None, pattern) is None

    def test_none_default_overload(self):
        assert format(None) is None


class TestFormatInstant:
    def test_uses_host_local_zone(self, host_tz):
        host_tz("UTC0")
        instant = LegacyInstant(1709298309000)  # 2024-03-01T13:05:09Z
        assert format(instant) == "2024-03-01 13:05:09"

        host_tz("CST-8")
        assert format(instant) == "2024-03-01 21:05:09"

    def test_explicit_pattern(self, host_tz):
        host_tz("UTC0")
        assert format(LegacyInstant(0), "yyyy/MM/dd HH:mm:ss.SSS") == "1970/01/01 00:00:00.000"

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="Cannot format value of type int"):
            format(42)
