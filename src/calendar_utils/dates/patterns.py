"""Compile ``yyyy-MM-dd``-style patterns into formatters and strict parsers.

A pattern is split into runs of the same letter (``yyyy``, ``MM``), quoted
literals (``'T'``) and plain literal characters. Each distinct pattern string
is compiled once and cached; compiled patterns are immutable and safe to share
between threads.

Supported letters::

    y, u   year            M   month (M, MM, MMM, MMMM)
    d      day of month    D   day of year (D, DD, DDD)
    E      day-of-week text (E..EEE, EEEE)
    H      hour 0-23       h   clock hour 1-12
    k      hour 1-24       K   hour of AM/PM 0-11
    a      AM/PM marker    m   minute
    s      second          S   fraction of second

Era (``G``), quarter (``Q``), standalone month (``L``), week-based fields
(``w``, ``W``, ``Y``), zone letters and any other ASCII letter are not
supported. They, the reserved characters ``# { } [ ]`` and an
unterminated quote raise :class:`InvalidFormatPattern`.
"""

from __future__ import annotations

import calendar
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from functools import lru_cache
from typing import Union

from calendar_utils.core.errors import DateParseFailure, InvalidFormatPattern

logger = logging.getLogger(__name__)

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
MONTH_FULL = ("January", "February", "March", "April", "May", "June", "July",
              "August", "September", "October", "November", "December")
# Indexed by ISO weekday - 1 (Monday first)
WEEKDAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEKDAY_FULL = ("Monday", "Tuesday", "Wednesday", "Thursday",
                "Friday", "Saturday", "Sunday")

# Maximum run length accepted per letter
_MAX_COUNT = {
    "y": 9, "u": 9,
    "M": 4, "d": 2, "D": 3, "E": 4,
    "H": 2, "h": 2, "k": 2, "K": 2, "a": 1, "m": 2, "s": 2, "S": 9,
}
DATE_LETTERS = frozenset("yuMdDE")
TIME_LETTERS = frozenset("HhkKamsS")
_RESERVED = frozenset("#{}[]")

Temporal = Union[date, datetime, time]


@dataclass(frozen=True)
class Field:
    """A run of one pattern letter, e.g. ``Field("M", 2)`` for ``MM``."""

    letter: str
    count: int


Token = Union[str, Field]


def _tokenize(pattern: str) -> tuple[Token, ...]:
    tokens: list[Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append("".join(literal))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "'":
            end = i + 1
            quoted: list[str] = []
            while True:
                if end >= n:
                    raise InvalidFormatPattern(pattern, "unterminated quote")
                if pattern[end] == "'":
                    # '' inside a quote is an escaped quote
                    if end + 1 < n and pattern[end + 1] == "'":
                        quoted.append("'")
                        end += 2
                        continue
                    break
                quoted.append(pattern[end])
                end += 1
            # A bare '' outside a quote is a single quote
            literal.append("".join(quoted) if end > i + 1 else "'")
            i = end + 1
            continue

        if c in _RESERVED:
            raise InvalidFormatPattern(pattern, f"reserved character {c!r}")

        if ("A" <= c <= "Z") or ("a" <= c <= "z"):
            if c not in _MAX_COUNT:
                raise InvalidFormatPattern(pattern, f"unknown pattern letter {c!r}")
            count = 1
            while i + count < n and pattern[i + count] == c:
                count += 1
            if count > _MAX_COUNT[c]:
                raise InvalidFormatPattern(pattern, f"too many pattern letters: {c * count}")
            flush()
            tokens.append(Field(c, count))
            i += count
            continue

        literal.append(c)
        i += 1

    flush()
    return tuple(tokens)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _format_field(f: Field, value: Temporal) -> str:
    c, count = f.letter, f.count
    if c in ("y", "u"):
        year = value.year
        if count == 2:
            return f"{year % 100:02d}"
        return str(year).zfill(count)
    if c == "M":
        if count == 4:
            return MONTH_FULL[value.month - 1]
        if count == 3:
            return MONTH_ABBR[value.month - 1]
        return f"{value.month:0{count}d}"
    if c == "d":
        return f"{value.day:0{count}d}"
    if c == "D":
        return f"{value.timetuple().tm_yday:0{count}d}"
    if c == "E":
        wd = value.isoweekday() - 1
        return WEEKDAY_FULL[wd] if count == 4 else WEEKDAY_ABBR[wd]
    if c == "H":
        return f"{value.hour:0{count}d}"
    if c == "h":
        return f"{value.hour % 12 or 12:0{count}d}"
    if c == "k":
        return f"{value.hour or 24:0{count}d}"
    if c == "K":
        return f"{value.hour % 12:0{count}d}"
    if c == "a":
        return "AM" if value.hour < 12 else "PM"
    if c == "m":
        return f"{value.minute:0{count}d}"
    if c == "s":
        return f"{value.second:0{count}d}"
    # S: fraction, truncated or zero-extended to the run length
    digits = f"{value.microsecond:06d}"
    return digits[:count] if count <= 6 else digits + "0" * (count - 6)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _field_regex(f: Field) -> str:
    c, count = f.letter, f.count
    if c in ("y", "u"):
        if count == 1:
            return "([0-9]{1,9})"
        return f"([0-9]{{{count}}})"
    if c == "M" and count >= 3:
        names = MONTH_FULL if count == 4 else MONTH_ABBR
        return "(" + "|".join(names) + ")"
    if c == "E":
        names = WEEKDAY_FULL if count == 4 else WEEKDAY_ABBR
        return "(" + "|".join(names) + ")"
    if c == "a":
        return "(AM|PM)"
    if c == "S":
        return f"([0-9]{{{count}}})"
    if c == "D":
        return ("([0-9]{1,3})", "([0-9]{2,3})", "([0-9]{3})")[count - 1]
    if count == 1:
        return "([0-9]{1,2})"
    return f"([0-9]{{{count}}})"


def _field_value(f: Field, raw: str) -> tuple[str, int]:
    """Map a matched run to a (field name, value) pair."""
    c, count = f.letter, f.count
    if c in ("y", "u"):
        year = int(raw)
        if count == 2:
            year += 2000
        return "year", year
    if c == "M":
        if count == 4:
            return "month", MONTH_FULL.index(raw) + 1
        if count == 3:
            return "month", MONTH_ABBR.index(raw) + 1
        return "month", int(raw)
    if c == "d":
        return "day", int(raw)
    if c == "D":
        return "day_of_year", int(raw)
    if c == "E":
        names = WEEKDAY_FULL if count == 4 else WEEKDAY_ABBR
        return "weekday", names.index(raw) + 1
    if c == "H":
        return "hour", int(raw)
    if c == "h":
        return "clock_hour", int(raw)
    if c == "k":
        return "clock_hour_of_day", int(raw)
    if c == "K":
        return "hour_of_ampm", int(raw)
    if c == "a":
        return "pm", int(raw == "PM")
    if c == "m":
        return "minute", int(raw)
    if c == "s":
        return "second", int(raw)
    return "microsecond", int(raw[:6].ljust(6, "0"))


_RANGES = {
    "month": (1, 12),
    "day": (1, 31),
    "day_of_year": (1, 366),
    "hour": (0, 23),
    "clock_hour": (1, 12),
    "clock_hour_of_day": (1, 24),
    "hour_of_ampm": (0, 11),
    "minute": (0, 59),
    "second": (0, 59),
}


@dataclass(frozen=True)
class CompiledPattern:
    """An immutable, compiled pattern. Obtain instances via :func:`compile_pattern`."""

    pattern: str
    tokens: tuple[Token, ...]
    regex: re.Pattern[str]

    @property
    def letters(self) -> frozenset[str]:
        return frozenset(t.letter for t in self.tokens if isinstance(t, Field))

    def format(self, value: Temporal) -> str:
        """Render ``value``; the pattern may only use fields the value has."""
        if isinstance(value, datetime):
            allowed = DATE_LETTERS | TIME_LETTERS
        elif isinstance(value, date):
            allowed = DATE_LETTERS
        else:
            allowed = TIME_LETTERS
        unsupported = self.letters - allowed
        if unsupported:
            raise InvalidFormatPattern(
                self.pattern,
                f"field(s) {''.join(sorted(unsupported))} not available on "
                f"{type(value).__name__}",
            )
        return "".join(
            _format_field(t, value) if isinstance(t, Field) else t
            for t in self.tokens
        )

    def parse_fields(self, text: str) -> dict[str, int]:
        """Match ``text`` in full and return the raw field values.

        Raises:
            DateParseFailure: on mismatch, out-of-range or conflicting fields.
        """
        m = self.regex.fullmatch(text)
        if m is None:
            raise self._failure(text, "text does not match pattern")

        fields: dict[str, int] = {}
        groups = iter(m.groups())
        for t in self.tokens:
            if not isinstance(t, Field):
                continue
            name, value = _field_value(t, next(groups))
            if name in fields and fields[name] != value:
                raise self._failure(text, f"conflicting values for {name}")
            fields[name] = value

        for name, (lo, hi) in _RANGES.items():
            if name in fields and not lo <= fields[name] <= hi:
                raise self._failure(text, f"{name} {fields[name]} out of range {lo}-{hi}")

        # h and K only resolve an hour together with the AM/PM marker
        derived = []
        if "clock_hour_of_day" in fields:
            derived.append(fields["clock_hour_of_day"] % 24)
        if "pm" in fields:
            if "clock_hour" in fields:
                derived.append(fields["clock_hour"] % 12 + 12 * fields["pm"])
            if "hour_of_ampm" in fields:
                derived.append(fields["hour_of_ampm"] + 12 * fields["pm"])
        for hour in derived:
            if fields.setdefault("hour", hour) != hour:
                raise self._failure(text, "conflicting values for hour")
        if "hour" in fields and "pm" in fields:
            if (fields["hour"] >= 12) != bool(fields["pm"]):
                raise self._failure(text, "hour conflicts with AM/PM marker")
        return fields

    def parse_date(self, text: str) -> date:
        fields = self.parse_fields(text)
        return self._resolve_date(text, fields)

    def parse_datetime(self, text: str) -> datetime:
        fields = self.parse_fields(text)
        d = self._resolve_date(text, fields)
        t = self._resolve_time(text, fields)
        return datetime.combine(d, t)

    def parse_time(self, text: str) -> time:
        fields = self.parse_fields(text)
        return self._resolve_time(text, fields)

    def _resolve_date(self, text: str, fields: dict[str, int]) -> date:
        if "day_of_year" in fields and "year" in fields and not (
            "month" in fields and "day" in fields
        ):
            d = self._resolve_day_of_year(text, fields)
            if fields.get("month", d.month) != d.month or fields.get("day", d.day) != d.day:
                raise self._failure(text, "day-of-year does not match date")
            fields["month"], fields["day"] = d.month, d.day

        missing = [k for k in ("year", "month", "day") if k not in fields]
        if missing:
            raise self._failure(text, f"pattern does not supply {', '.join(missing)}")
        try:
            d = date(fields["year"], fields["month"], fields["day"])
        except ValueError as e:
            raise self._failure(text, str(e)) from e
        if "day_of_year" in fields and fields["day_of_year"] != d.timetuple().tm_yday:
            raise self._failure(text, "day-of-year does not match date")
        if "weekday" in fields and fields["weekday"] != d.isoweekday():
            raise self._failure(
                text, f"day-of-week {WEEKDAY_FULL[fields['weekday'] - 1]} does not match date"
            )
        return d

    def _resolve_day_of_year(self, text: str, fields: dict[str, int]) -> date:
        year, ordinal = fields["year"], fields["day_of_year"]
        try:
            start = date(year, 1, 1)
        except ValueError as e:
            raise self._failure(text, str(e)) from e
        length = 366 if calendar.isleap(year) else 365
        if ordinal > length:
            raise self._failure(text, f"day_of_year {ordinal} out of range 1-{length}")
        return start + timedelta(days=ordinal - 1)

    def _resolve_time(self, text: str, fields: dict[str, int]) -> time:
        if "hour" not in fields:
            raise self._failure(text, "pattern does not supply hour")
        return time(
            fields["hour"],
            fields.get("minute", 0),
            fields.get("second", 0),
            fields.get("microsecond", 0),
        )

    def _failure(self, text: str, reason: str) -> DateParseFailure:
        logger.debug("Parse of %r with pattern %r failed: %s", text, self.pattern, reason)
        return DateParseFailure(text, self.pattern, reason)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile ``pattern`` (cached per distinct string).

    Raises:
        InvalidFormatPattern: if the pattern is malformed.
    """
    tokens = _tokenize(pattern)
    regex = re.compile("".join(
        _field_regex(t) if isinstance(t, Field) else re.escape(t) for t in tokens
    ))
    logger.debug("Compiled pattern %r into %d tokens", pattern, len(tokens))
    return CompiledPattern(pattern=pattern, tokens=tokens, regex=regex)
