"""Signed differences between two values of the same kind.

Results count whole units from ``start`` to ``end``, truncated toward zero.
If either operand is ``None`` the result is ``0``, which is indistinguishable
from a genuinely empty interval.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Union

from calendar_utils.core.models import LegacyInstant

from .conversion import to_local_date

_MICROSECOND = timedelta(microseconds=1)


def _whole_units(delta: timedelta, unit: timedelta) -> int:
    micros = delta // _MICROSECOND
    n = abs(micros) // (unit // _MICROSECOND)
    return n if micros >= 0 else -n


def _require_datetimes(start: object, end: object) -> None:
    for v in (start, end):
        if not isinstance(v, datetime):
            raise TypeError(f"Expected datetime, got {type(v).__name__}")


def days_between(
    start: Union[date, datetime, LegacyInstant, None],
    end: Union[date, datetime, LegacyInstant, None],
) -> int:
    """Whole days from ``start`` to ``end``.

    Instants are first reduced to host-local dates, so two instants on the
    same local calendar day are 0 days apart.

    Raises:
        TypeError: if the operands are of different kinds.
    """
    if start is None or end is None:
        return 0
    if isinstance(start, LegacyInstant) and isinstance(end, LegacyInstant):
        return (to_local_date(end) - to_local_date(start)).days
    if isinstance(start, datetime) and isinstance(end, datetime):
        return _whole_units(end - start, timedelta(days=1))
    if (
        isinstance(start, date) and not isinstance(start, datetime)
        and isinstance(end, date) and not isinstance(end, datetime)
    ):
        return (end - start).days
    raise TypeError(
        f"Cannot difference {type(start).__name__} and {type(end).__name__}"
    )


def hours_between(start: datetime | None, end: datetime | None) -> int:
    if start is None or end is None:
        return 0
    _require_datetimes(start, end)
    return _whole_units(end - start, timedelta(hours=1))


def minutes_between(start: datetime | None, end: datetime | None) -> int:
    if start is None or end is None:
        return 0
    _require_datetimes(start, end)
    return _whole_units(end - start, timedelta(minutes=1))


def seconds_between(start: datetime | None, end: datetime | None) -> int:
    if start is None or end is None:
        return 0
    _require_datetimes(start, end)
    return _whole_units(end - start, timedelta(seconds=1))
