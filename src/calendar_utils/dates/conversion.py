"""Conversions between the civil kinds and :class:`LegacyInstant`.

All conversions anchor on the host-local time zone. Dates are converted via
their start of day. ``None`` in gives ``None`` out.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from functools import singledispatch

from calendar_utils.core.models import LegacyInstant


def to_local_datetime(instant: LegacyInstant | None) -> datetime | None:
    """Naive host-local datetime for ``instant``."""
    if instant is None:
        return None
    return instant.to_utc().astimezone().replace(tzinfo=None)


def to_local_date(instant: LegacyInstant | None) -> date | None:
    """Host-local calendar date containing ``instant``."""
    if instant is None:
        return None
    return to_local_datetime(instant).date()


@singledispatch
def to_instant(value: object) -> LegacyInstant | None:
    """Instant for a naive ``date`` (start of day) or ``datetime`` in host-local time."""
    raise TypeError(f"Cannot convert value of type {type(value).__name__} to an instant")


@to_instant.register(type(None))
def _none_to_instant(value: None) -> None:
    return None


@to_instant.register(date)
def _date_to_instant(value: date) -> LegacyInstant:
    return _datetime_to_instant(datetime.combine(value, time.min))


@to_instant.register(datetime)
def _datetime_to_instant(value: datetime) -> LegacyInstant:
    """Resolve ``value`` as host-local time.

    In an autumn overlap the earlier offset wins. A wall time inside a
    spring-forward gap does not exist locally and is moved forward by the
    length of the gap (02:30 becomes 03:30 for a one-hour gap).
    """
    # astimezone() on a naive datetime treats it as host-local time
    utc = value.astimezone(timezone.utc)
    if value.tzinfo is None and utc.astimezone().replace(tzinfo=None) != value:
        utc = value.replace(fold=1).astimezone(timezone.utc)
    return LegacyInstant.from_aware(utc)


@to_instant.register(LegacyInstant)
def _instant_to_instant(value: LegacyInstant) -> LegacyInstant:
    return value
