"""Constants, errors, value types, clock and settings."""
