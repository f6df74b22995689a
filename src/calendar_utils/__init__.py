"""Calendar utilities: pure date/time helpers and a null check."""

from calendar_utils.core.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_DATETIME_FORMAT,
    DEFAULT_TIME_FORMAT,
    DEFAULT_TIME_ZONE,
    default_time_zone,
)
from calendar_utils.core.errors import (
    CalendarError,
    DateParseFailure,
    InvalidFormatPattern,
    NullArgument,
)
from calendar_utils.core.models import LegacyInstant
from calendar_utils.getters import is_null

__version__ = "0.1.0"

__all__ = [
    "CalendarError",
    "DEFAULT_DATETIME_FORMAT",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_TIME_FORMAT",
    "DEFAULT_TIME_ZONE",
    "DateParseFailure",
    "InvalidFormatPattern",
    "LegacyInstant",
    "NullArgument",
    "default_time_zone",
    "is_null",
]
