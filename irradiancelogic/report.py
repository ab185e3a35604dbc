from __future__ import annotations
from typing import Iterable, Optional

from .aggregate import day_to_month
from .config import ReportConfig
from .types import AggregationState, ReportLine

_DEFAULT_CONFIG = ReportConfig()


def average(total: float, count: int) -> float:
    return total / count if count != 0 else 0.0


def month_average(state: AggregationState, month: str) -> float:
    return average(state.month_total.get(month, 0.0), state.month_count.get(month, 0))


def total_report(state: AggregationState, include_average: bool = False) -> list[ReportLine]:
    lines = [ReportLine("Total: ", state.total)]
    if include_average:
        lines.append(ReportLine("Average: ", average(state.total, state.count)))
    return lines


def months_report(state: AggregationState, include_average: bool = False) -> list[ReportLine]:
    """Global total followed by one total (and optional average) per month, ascending."""
    lines = total_report(state, include_average)
    for month in state.months():
        lines.append(ReportLine(f"Total in month {month}: ", state.month_total[month]))
        if include_average:
            lines.append(
                ReportLine(f"Average in month {month}: ", month_average(state, month))
            )
    return lines


def days_of_week_report(state: AggregationState) -> list[ReportLine]:
    """
    Day totals in ascending order, with each month's average emitted once
    after its last day.

    The month average is written when the walk crosses into a new month and
    once more for the final month. No days means no lines at all.
    """
    lines: list[ReportLine] = []
    current: Optional[str] = None
    for day in state.days():
        month = day_to_month(day)
        if month != current:
            if current is not None:
                lines.append(
                    ReportLine(f"Average in month {current}: ", month_average(state, current))
                )
            current = month
        lines.append(ReportLine(f"Total in day {day}: ", state.day_total[day]))
    if current is not None:
        lines.append(
            ReportLine(f"Average in month {current}: ", month_average(state, current))
        )
    return lines


def format_value(value: float, config: ReportConfig = _DEFAULT_CONFIG) -> str:
    s = f"{value:,.{config.decimals}f}"
    # swap python's "," / "." for the configured separators
    s = s.replace(",", "\0").replace(".", config.decimal_sep).replace("\0", config.group_sep)
    return s + config.unit


def format_line(line: ReportLine, config: ReportConfig = _DEFAULT_CONFIG) -> str:
    return (
        f"{line.label:<{config.label_width}} "
        f"{format_value(line.value, config):>{config.value_width}}"
    )


def render(lines: Iterable[ReportLine], config: ReportConfig = _DEFAULT_CONFIG) -> list[str]:
    return [format_line(line, config) for line in lines]
