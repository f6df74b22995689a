"""Process-wide default patterns and time zone label.

The pattern strings are part of the public contract and must not change.
"""

from __future__ import annotations

from zoneinfo import ZoneInfo

DEFAULT_DATE_FORMAT = "yyyy-MM-dd"
DEFAULT_DATETIME_FORMAT = "yyyy-MM-dd HH:mm:ss"
DEFAULT_TIME_FORMAT = "HH:mm:ss"

# Documented default only. Conversions to and from LegacyInstant use the
# host-local zone.
DEFAULT_TIME_ZONE = "Asia/Shanghai"


def default_time_zone() -> ZoneInfo:
    """Return the ``ZoneInfo`` for :data:`DEFAULT_TIME_ZONE`."""
    return ZoneInfo(DEFAULT_TIME_ZONE)
