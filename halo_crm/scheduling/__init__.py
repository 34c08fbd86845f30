"""Scheduling core: recurrence, occurrence resolution, pricing and earnings."""

from .recurrence import is_occurrence, parse_local_date, week_dates
from .occurrences import (
    build_override_index,
    format_time,
    resolve_occurrences_for_date,
    resolve_occurrences_for_range,
)
from .pricing import headcount, resolve_price

__all__ = [
    "is_occurrence",
    "parse_local_date",
    "week_dates",
    "build_override_index",
    "format_time",
    "resolve_occurrences_for_date",
    "resolve_occurrences_for_range",
    "headcount",
    "resolve_price",
]
