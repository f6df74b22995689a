"""Value types shared across the calendar utilities.

``datetime.date``, ``datetime.datetime`` (naive) and ``datetime.time`` are
used directly for the civil kinds. The only custom type is the legacy
epoch-based instant.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True, order=True)
class LegacyInstant:
    """An absolute point in time as milliseconds since the Unix epoch.

    Rendering it as civil fields needs a time zone; the conversion helpers in
    :mod:`calendar_utils.dates.conversion` always use the host-local zone.
    """

    epoch_ms: int

    @classmethod
    def from_epoch_ms(cls, epoch_ms: int) -> LegacyInstant:
        return cls(int(epoch_ms))

    @classmethod
    def from_aware(cls, dt: datetime) -> LegacyInstant:
        """Build from a timezone-aware datetime. Sub-millisecond precision is dropped."""
        if dt.tzinfo is None:
            raise ValueError("LegacyInstant.from_aware requires a timezone-aware datetime")
        return cls((dt - EPOCH) // _ONE_MS)

    def to_utc(self) -> datetime:
        """Return this instant as an aware UTC datetime."""
        return EPOCH + timedelta(milliseconds=self.epoch_ms)

    def __str__(self) -> str:
        return self.to_utc().isoformat(timespec="milliseconds")
