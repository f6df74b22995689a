"""Chronological comparison.

``compare`` treats a missing operand as a caller error and raises
:class:`NullArgument`. The date predicates ``is_before``, ``is_after`` and
``is_equal`` answer ``False`` instead. Keep the two behaviours distinct.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

from calendar_utils.core.errors import NullArgument
from calendar_utils.core.models import LegacyInstant

Comparable = Union[date, datetime, LegacyInstant]


def _kind(value: Comparable) -> type:
    if isinstance(value, datetime):
        return datetime
    if isinstance(value, date):
        return date
    if isinstance(value, LegacyInstant):
        return LegacyInstant
    raise TypeError(f"Cannot compare value of type {type(value).__name__}")


def compare(a: Comparable | None, b: Comparable | None) -> int:
    """Return -1, 0 or 1 as ``a`` is before, equal to or after ``b``.

    Both operands must be the same kind (date, datetime or LegacyInstant).

    Raises:
        NullArgument: if either operand is ``None``.
        TypeError: if the operands are of different kinds.
    """
    if a is None or b is None:
        raise NullArgument("Values to compare must not be None")
    kind_a, kind_b = _kind(a), _kind(b)
    if kind_a is not kind_b:
        raise TypeError(f"Cannot compare {kind_a.__name__} with {kind_b.__name__}")
    return (a > b) - (a < b)


def is_before(a: date | None, b: date | None) -> bool:
    if a is None or b is None:
        return False
    return a < b


def is_after(a: date | None, b: date | None) -> bool:
    if a is None or b is None:
        return False
    return a > b


def is_equal(a: date | None, b: date | None) -> bool:
    if a is None or b is None:
        return False
    return a == b
