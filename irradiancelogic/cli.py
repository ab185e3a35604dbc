from __future__ import annotations
import argparse
import calendar
import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional, Sequence

from . import canon, ingest, report
from .config import ReportConfig, resolve_source
from .exceptions import SourceUnavailableError
from .types import AggregationState, FilterSpec, ReportLine, Weekday

logger = logging.getLogger(__name__)

Mode = Literal["total", "months", "days_of_week"]


@dataclass(frozen=True)
class Invocation:
    mode: Mode
    spec: FilterSpec
    include_average: bool


def _positional(tokens: Sequence[str]) -> list[str]:
    return [t for t in tokens if t != canon.AVERAGE_FLAG]


def _parse_month(token: str) -> Optional[datetime]:
    if not canon.RANGE_TOKEN_PATTERN.match(token):
        return None
    try:
        return datetime.strptime(token, canon.RANGE_TOKEN_FORMAT)
    except ValueError:
        return None


def _month_end(month: datetime) -> datetime:
    last_day = calendar.monthrange(month.year, month.month)[1]
    return month.replace(day=last_day, hour=23, minute=59, second=59)


def decode_range(tokens: Sequence[str]) -> tuple[Optional[datetime], Optional[datetime]]:
    """
    'FROM TO' (YYYYMM each) -> (first instant of FROM, last second of TO).

    Anything unparsable yields (None, None).
    """
    args = _positional(tokens)
    if len(args) < 2:
        return None, None
    start, to_month = _parse_month(args[0]), _parse_month(args[1])
    if start is None or to_month is None:
        return None, None
    return start, _month_end(to_month)


def decode_day_of_week(tokens: Sequence[str]) -> int:
    """Third positional token as 1..7; anything else disables the filter (0)."""
    args = _positional(tokens)
    if len(args) < 3:
        return canon.DAY_OF_WEEK_DISABLED
    try:
        day = int(args[2])
    except ValueError:
        return canon.DAY_OF_WEEK_DISABLED
    return day if day in tuple(Weekday) else canon.DAY_OF_WEEK_DISABLED


def decode_average(tokens: Sequence[str]) -> bool:
    return canon.AVERAGE_FLAG in tokens


def decode_invocation(tokens: Sequence[str]) -> Invocation:
    start, end = decode_range(tokens)
    include_average = decode_average(tokens)
    if start is None or end is None:
        return Invocation("total", FilterSpec(), include_average)
    day_of_week = decode_day_of_week(tokens)
    if day_of_week == canon.DAY_OF_WEEK_DISABLED:
        return Invocation("months", FilterSpec(start, end), include_average)
    # averages are part of the day-of-week report
    return Invocation("days_of_week", FilterSpec(start, end, day_of_week), True)


def build_report(state: AggregationState, invocation: Invocation) -> list[ReportLine]:
    if invocation.mode == "days_of_week":
        return report.days_of_week_report(state)
    if invocation.mode == "months":
        return report.months_report(state, invocation.include_average)
    return report.total_report(state, invocation.include_average)


def configure_logging(verbose: bool = False) -> None:
    root = logging.getLogger(__package__)
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sunshine",
        description="Irradiance totals and averages from a timestamp,value CSV export.",
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        help="[FROM TO [DAY]] with FROM/TO as YYYYMM and DAY as 1 (Mon) .. 7 (Sun)",
    )
    parser.add_argument(
        canon.AVERAGE_FLAG, dest="average", action="store_true", help="include averages"
    )
    parser.add_argument("--input", default=None, help="CSV file to read instead of the bundled export")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(
    invocation: Invocation,
    source: ingest.Source = None,
    config: Optional[ReportConfig] = None,
) -> int:
    config = config or ReportConfig()
    try:
        state = ingest.load(source, invocation.spec)
    except SourceUnavailableError:
        logger.error(canon.INPUT_FILE_ERROR_MESSAGE)
        return 1
    for line in report.render(build_report(state, invocation), config):
        logger.info(line)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args, _unknown = _parser().parse_known_intermixed_args(argv)
    tokens = list(args.tokens) + ([canon.AVERAGE_FLAG] if args.average else [])
    configure_logging(args.verbose)
    return run(decode_invocation(tokens), resolve_source(args.input))
