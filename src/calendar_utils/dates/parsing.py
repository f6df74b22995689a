"""Parse strings into dates, date-times, times and instants.

``None`` or ``""`` input gives ``None``; any other text that does not match
the pattern raises :class:`DateParseFailure`. A ``None`` or empty pattern
selects the kind's default pattern.
"""

from __future__ import annotations

from datetime import date, datetime, time

from calendar_utils.core.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_DATETIME_FORMAT,
    DEFAULT_TIME_FORMAT,
)
from calendar_utils.core.models import LegacyInstant

from .conversion import to_instant
from .patterns import compile_pattern


def parse_date(text: str | None, pattern: str | None = None) -> date | None:
    if not text:
        return None
    return compile_pattern(pattern or DEFAULT_DATE_FORMAT).parse_date(text)


def parse_datetime(text: str | None, pattern: str | None = None) -> datetime | None:
    if not text:
        return None
    return compile_pattern(pattern or DEFAULT_DATETIME_FORMAT).parse_datetime(text)


def parse_time(text: str | None, pattern: str | None = None) -> time | None:
    if not text:
        return None
    return compile_pattern(pattern or DEFAULT_TIME_FORMAT).parse_time(text)


def parse_instant(text: str | None, pattern: str | None = None) -> LegacyInstant | None:
    """Parse ``text`` into a :class:`LegacyInstant` via the host-local zone.

    Without a pattern, the (stripped) input is read as a date anchored to
    start of day when its length equals ``len("yyyy-MM-dd")``, and as a
    ``yyyy-MM-dd HH:mm:ss`` date-time otherwise.

    With an explicit pattern the branch is chosen by the *pattern*, not the
    input: only the exact string ``"yyyy-MM-dd"`` parses as a date. Any other
    pattern, including date-only ones such as ``"dd/MM/yyyy"``, is parsed as a
    date-time and therefore fails for lack of an hour field. This mirrors
    long-standing behaviour that callers may depend on.
    """
    if not text:
        return None

    if not pattern:
        text = text.strip()
        if len(text) == len(DEFAULT_DATE_FORMAT):
            return to_instant(compile_pattern(DEFAULT_DATE_FORMAT).parse_date(text))
        return to_instant(compile_pattern(DEFAULT_DATETIME_FORMAT).parse_datetime(text))

    if pattern == DEFAULT_DATE_FORMAT:
        return to_instant(compile_pattern(pattern).parse_date(text))
    return to_instant(compile_pattern(pattern).parse_datetime(text))
