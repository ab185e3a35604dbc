from __future__ import annotations
from datetime import datetime
from typing import Iterable, Optional

from . import canon
from .filters import accepts
from .types import AggregationState, FilterSpec, Record


def month_key(ts: datetime) -> str:
    return ts.strftime(canon.MONTH_FORMAT)


def day_key(ts: datetime) -> str:
    return ts.strftime(canon.DAY_FORMAT)


def day_to_month(day: str) -> str:
    """'YYYY-MM-DD' -> 'YYYY-MM'."""
    return day[:7]


def _add(totals: dict[str, float], counts: dict[str, int], key: str, value: float) -> None:
    totals[key] = totals.get(key, 0.0) + value
    counts[key] = counts.get(key, 0) + 1


def accumulate(state: AggregationState, record: Record) -> None:
    """
    Fold one accepted record into the state.

    Filtering must already have happened; every record reaching here counts
    towards the global, month and day totals.
    """
    state.total += record.value
    state.count += 1
    _add(state.month_total, state.month_count, month_key(record.timestamp), record.value)
    _add(state.day_total, state.day_count, day_key(record.timestamp), record.value)


def aggregate(
    records: Iterable[Record], spec: Optional[FilterSpec] = None
) -> AggregationState:
    """Build a fresh state from records, skipping those the filter rejects."""
    spec = spec or FilterSpec()
    state = AggregationState()
    for record in records:
        if accepts(record, spec):
            accumulate(state, record)
    return state
