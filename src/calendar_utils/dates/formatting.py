"""Current-moment accessors and ``format`` for every value kind.

``format`` dispatches on the runtime type of its first argument:

* ``datetime`` -> default ``yyyy-MM-dd HH:mm:ss``
* ``date``     -> default ``yyyy-MM-dd``
* ``time``     -> default ``HH:mm:ss``
* ``LegacyInstant`` -> converted to a host-local datetime, then formatted
  like a ``datetime``
* ``None``     -> ``None``

A ``None`` or empty pattern selects the kind's default pattern.
"""

from __future__ import annotations

from datetime import date, datetime, time
from functools import singledispatch

from calendar_utils.core.clock import WALL_CLOCK, IClock
from calendar_utils.core.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_DATETIME_FORMAT,
    DEFAULT_TIME_FORMAT,
)
from calendar_utils.core.models import LegacyInstant

from .conversion import to_local_datetime
from .patterns import compile_pattern


def current_date(clock: IClock = WALL_CLOCK) -> str:
    """Today's date as ``yyyy-MM-dd``."""
    return format(clock.now().date())


def current_datetime(clock: IClock = WALL_CLOCK) -> str:
    """Now as ``yyyy-MM-dd HH:mm:ss``."""
    return format(clock.now())


def current_time(clock: IClock = WALL_CLOCK) -> str:
    """Current time of day as ``HH:mm:ss``."""
    return format(clock.now().time())


@singledispatch
def format(value: object, pattern: str | None = None) -> str | None:
    """Format ``value`` with ``pattern`` (or the kind's default pattern).

    Raises:
        InvalidFormatPattern: if ``pattern`` is malformed or names fields the
            value does not have.
        TypeError: if ``value`` is not a supported kind.
    """
    raise TypeError(f"Cannot format value of type {type(value).__name__}")


@format.register(type(None))
def _format_none(value: None, pattern: str | None = None) -> None:
    return None


@format.register(date)
def _format_date(value: date, pattern: str | None = None) -> str:
    return compile_pattern(pattern or DEFAULT_DATE_FORMAT).format(value)


@format.register(datetime)
def _format_datetime(value: datetime, pattern: str | None = None) -> str:
    return compile_pattern(pattern or DEFAULT_DATETIME_FORMAT).format(value)


@format.register(time)
def _format_time(value: time, pattern: str | None = None) -> str:
    return compile_pattern(pattern or DEFAULT_TIME_FORMAT).format(value)


@format.register(LegacyInstant)
def _format_instant(value: LegacyInstant, pattern: str | None = None) -> str:
    return _format_datetime(to_local_datetime(value), pattern)
