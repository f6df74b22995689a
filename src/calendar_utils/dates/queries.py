"""Calendar-property queries on dates.

None of these raise for a missing date: they return ``None``, ``False`` or
``0`` as appropriate.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import TypeVar

D = TypeVar("D", bound=date)

MONDAY = 1
SATURDAY = 6
SUNDAY = 7


def first_day_of_month(d: D | None) -> D | None:
    if d is None:
        return None
    return d.replace(day=1)


def last_day_of_month(d: D | None) -> D | None:
    if d is None:
        return None
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def first_day_of_week(d: D | None) -> D | None:
    """The Monday on or before ``d``."""
    if d is None:
        return None
    return d - timedelta(days=d.isoweekday() - MONDAY)


def last_day_of_week(d: D | None) -> D | None:
    """The Sunday on or after ``d``."""
    if d is None:
        return None
    return d + timedelta(days=SUNDAY - d.isoweekday())


def is_weekend(d: date | None) -> bool:
    if d is None:
        return False
    return d.isoweekday() in (SATURDAY, SUNDAY)


def is_weekday(d: date | None) -> bool:
    # None is neither a weekday nor a weekend day
    if d is None:
        return False
    return not is_weekend(d)


def day_of_week(d: date | None) -> int:
    """ISO day of week, Monday=1 .. Sunday=7; ``0`` for ``None``."""
    if d is None:
        return 0
    return d.isoweekday()


def days_in_month(d: date | None) -> int:
    if d is None:
        return 0
    return calendar.monthrange(d.year, d.month)[1]


def is_leap_year(year_or_date: int | date | None) -> bool:
    """Proleptic Gregorian leap-year test for a year number or a date."""
    if year_or_date is None:
        return False
    if isinstance(year_or_date, date):
        return calendar.isleap(year_or_date.year)
    return calendar.isleap(year_or_date)
