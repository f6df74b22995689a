"""Null-check helper."""

from __future__ import annotations

from typing import Any


def is_null(value: Any) -> bool:
    """True iff ``value`` is ``None``."""
    return value is None
