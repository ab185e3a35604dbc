from __future__ import annotations
from datetime import datetime

from .types import FilterSpec, Record, Weekday


def weekday(ts: datetime) -> Weekday:
    """Monday=1 .. Sunday=7, from the calendar date alone."""
    return Weekday(ts.isoweekday())


def in_range(ts: datetime, spec: FilterSpec) -> bool:
    """Inclusive [start, end]; always True unless both bounds are set."""
    if not spec.has_range:
        return True
    return spec.start <= ts <= spec.end  # type: ignore[operator]


def accepts(record: Record, spec: FilterSpec) -> bool:
    if not in_range(record.timestamp, spec):
        return False
    if spec.has_day_of_week:
        return weekday(record.timestamp) == spec.day_of_week
    return True
