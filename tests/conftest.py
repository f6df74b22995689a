"""Shared fixtures for the calendar-utils test suite."""

from __future__ import annotations

import logging
import os
import time
from datetime import date, datetime

import pytest
import structlog

from calendar_utils.core.clock import FixedClock


# ---------------------------------------------------------------------------
# Sample values
# ---------------------------------------------------------------------------

@pytest.fixture
def leap_day() -> date:
    """Thursday, 29 Feb 2024."""
    return date(2024, 2, 29)


@pytest.fixture
def sample_datetime() -> datetime:
    """Friday, 1 Mar 2024 13:05:09."""
    return datetime(2024, 3, 1, 13, 5, 9)


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_clock(sample_datetime) -> FixedClock:
    return FixedClock(start=sample_datetime)


# ---------------------------------------------------------------------------
# Host time zone
# ---------------------------------------------------------------------------

@pytest.fixture
def host_tz():
    """Switch the process-local time zone for the duration of a test.

    Usage: ``host_tz("CST-8")``. POSIX TZ strings avoid depending on the
    system zoneinfo database. The original ``TZ`` is restored afterwards.
    """
    original = os.environ.get("TZ")

    def _set(name: str) -> None:
        os.environ["TZ"] = name
        time.tzset()

    yield _set

    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def restore_logging():
    """Undo any root-logger and structlog configuration made by a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
