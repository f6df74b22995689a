"""Custom exception hierarchy for the calendar utilities."""


class CalendarError(Exception):
    """Base exception for all calendar utility errors."""


# --- Patterns ---
class InvalidFormatPattern(CalendarError, ValueError):
    """Pattern string cannot be compiled, or does not fit the value kind."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid format pattern {pattern!r}: {reason}")


# --- Parsing ---
class DateParseFailure(CalendarError, ValueError):
    """Input text does not match the pattern or encodes an impossible value."""

    def __init__(self, text: str, pattern: str, reason: str):
        self.text = text
        self.pattern = pattern
        self.reason = reason
        super().__init__(
            f"Text {text!r} could not be parsed with pattern {pattern!r}: {reason}"
        )


# --- Arguments ---
class NullArgument(CalendarError, ValueError):
    """A required operand was absent (None)."""
