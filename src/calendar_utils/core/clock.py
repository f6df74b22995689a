"""Clock abstraction for reading "now".

WallClock: the host clock in the host-local zone
FixedClock: a settable clock for deterministic tests

The current-moment accessors never call datetime.now() directly; they ask a
clock, defaulting to WallClock.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol


class IClock(Protocol):
    """Clock interface used by the current-moment accessors."""

    def now(self) -> datetime:
        """Current host-local time as a naive datetime."""
        ...

    def now_ms(self) -> int:
        """Current time as milliseconds since epoch."""
        ...


class WallClock:
    """Real host clock. Every call reads the clock afresh."""

    def now(self) -> datetime:
        return datetime.now()

    def now_ms(self) -> int:
        return int(self.now().timestamp() * 1000)


class FixedClock:
    """Clock that only moves when told to.

    Holds a naive host-local datetime.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._time = datetime(2024, 1, 1)
        if start is not None:
            self.set_time(start)

    def now(self) -> datetime:
        return self._time

    def now_ms(self) -> int:
        return int(self._time.timestamp() * 1000)

    def set_time(self, t: datetime) -> None:
        if t.tzinfo is not None:
            raise ValueError(f"FixedClock holds naive local time, got {t!r}")
        self._time = t

    def advance_ms(self, ms: int) -> None:
        """Advance time by milliseconds."""
        self.set_time(self._time + timedelta(milliseconds=ms))


WALL_CLOCK = WallClock()
