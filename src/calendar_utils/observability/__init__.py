"""Logging setup for host applications."""

from .logger import (
    get_logger,
    get_trace_id,
    new_trace_id,
    set_trace_id,
    setup_logging,
    setup_logging_from_settings,
)

__all__ = [
    "get_logger",
    "get_trace_id",
    "new_trace_id",
    "set_trace_id",
    "setup_logging",
    "setup_logging_from_settings",
]
