"""Date and time formatting, parsing, arithmetic and calendar queries.

Three value kinds are supported throughout: ``datetime.date``, naive
``datetime.datetime`` and :class:`~calendar_utils.core.models.LegacyInstant`
(plus ``datetime.time`` for formatting and parsing). All functions are pure.
"""

from .arithmetic import (
    minus_days,
    minus_hours,
    minus_minutes,
    minus_months,
    minus_seconds,
    minus_years,
    plus_days,
    plus_hours,
    plus_minutes,
    plus_months,
    plus_seconds,
    plus_years,
)
from .comparison import compare, is_after, is_before, is_equal
from .conversion import to_instant, to_local_date, to_local_datetime
from .difference import days_between, hours_between, minutes_between, seconds_between
from .formatting import current_date, current_datetime, current_time, format
from .parsing import parse_date, parse_datetime, parse_instant, parse_time
from .patterns import CompiledPattern, compile_pattern
from .queries import (
    day_of_week,
    days_in_month,
    first_day_of_month,
    first_day_of_week,
    is_leap_year,
    is_weekday,
    is_weekend,
    last_day_of_month,
    last_day_of_week,
)

__all__ = [
    "CompiledPattern",
    "compare",
    "compile_pattern",
    "current_date",
    "current_datetime",
    "current_time",
    "day_of_week",
    "days_between",
    "days_in_month",
    "first_day_of_month",
    "first_day_of_week",
    "format",
    "hours_between",
    "is_after",
    "is_before",
    "is_equal",
    "is_leap_year",
    "is_weekday",
    "is_weekend",
    "last_day_of_month",
    "last_day_of_week",
    "minus_days",
    "minus_hours",
    "minus_minutes",
    "minus_months",
    "minus_seconds",
    "minus_years",
    "minutes_between",
    "parse_date",
    "parse_datetime",
    "parse_instant",
    "parse_time",
    "plus_days",
    "plus_hours",
    "plus_minutes",
    "plus_months",
    "plus_seconds",
    "plus_years",
    "seconds_between",
    "to_instant",
    "to_local_date",
    "to_local_datetime",
]
