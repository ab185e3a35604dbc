from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Dict, Optional

from . import canon


class Weekday(IntEnum):
    """Monday-first weekday numbering, matching ``datetime.isoweekday()``."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


@dataclass(frozen=True)
class Record:
    timestamp: datetime  # minute precision, naive wall-clock
    value: float  # W/m2


@dataclass(frozen=True)
class FilterSpec:
    """
    Immutable filter for one invocation.

    - start/end: inclusive window; the range check is skipped unless both are set
    - day_of_week: 1..7 (Monday..Sunday), 0 disables the weekday check
    """

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    day_of_week: int = canon.DAY_OF_WEEK_DISABLED

    @property
    def has_range(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def has_day_of_week(self) -> bool:
        return self.day_of_week in tuple(Weekday)


@dataclass
class AggregationState:
    """
    Running totals and counts, globally and keyed by 'YYYY-MM' / 'YYYY-MM-DD'.

    Mutated only by aggregate.accumulate; treat as read-only afterwards.
    """

    total: float = 0.0
    count: int = 0
    month_total: Dict[str, float] = field(default_factory=dict)
    month_count: Dict[str, int] = field(default_factory=dict)
    day_total: Dict[str, float] = field(default_factory=dict)
    day_count: Dict[str, int] = field(default_factory=dict)

    def months(self) -> list[str]:
        return sorted(self.month_total)

    def days(self) -> list[str]:
        return sorted(self.day_total)


@dataclass(frozen=True)
class ReportLine:
    label: str
    value: float
