"""Add or subtract whole calendar units.

Years and months use ``relativedelta`` so the day is clamped to the end of
the target month (Jan 31 + 1 month -> Feb 28/29). Days and smaller units are
exact ``timedelta`` steps on the naive value. ``None`` in gives ``None`` out.

Dates accept years, months and days; hour, minute and second steps need a
``datetime``.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import TypeVar

from dateutil.relativedelta import relativedelta

D = TypeVar("D", date, datetime)


def _require_datetime(value: date, unit: str) -> None:
    if not isinstance(value, datetime):
        raise TypeError(f"Adding {unit} needs a datetime, got {type(value).__name__}")


def plus_years(value: D | None, years: int) -> D | None:
    if value is None:
        return None
    return value + relativedelta(years=years)


def plus_months(value: D | None, months: int) -> D | None:
    if value is None:
        return None
    return value + relativedelta(months=months)


def plus_days(value: D | None, days: int) -> D | None:
    if value is None:
        return None
    return value + timedelta(days=days)


def plus_hours(value: datetime | None, hours: int) -> datetime | None:
    if value is None:
        return None
    _require_datetime(value, "hours")
    return value + timedelta(hours=hours)


def plus_minutes(value: datetime | None, minutes: int) -> datetime | None:
    if value is None:
        return None
    _require_datetime(value, "minutes")
    return value + timedelta(minutes=minutes)


def plus_seconds(value: datetime | None, seconds: int) -> datetime | None:
    if value is None:
        return None
    _require_datetime(value, "seconds")
    return value + timedelta(seconds=seconds)


def minus_years(value: D | None, years: int) -> D | None:
    return plus_years(value, -years)


def minus_months(value: D | None, months: int) -> D | None:
    return plus_months(value, -months)


def minus_days(value: D | None, days: int) -> D | None:
    return plus_days(value, -days)


def minus_hours(value: datetime | None, hours: int) -> datetime | None:
    return plus_hours(value, -hours)


def minus_minutes(value: datetime | None, minutes: int) -> datetime | None:
    return plus_minutes(value, -minutes)


def minus_seconds(value: datetime | None, seconds: int) -> datetime | None:
    return plus_seconds(value, -seconds)
