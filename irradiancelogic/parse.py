from __future__ import annotations
import math
import re
from datetime import datetime
from typing import Optional

from . import canon
from .exceptions import RowParseError
from .types import Record

# Period decimal point, optional exponent; no grouping, no underscores.
_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def parse_timestamp(raw: str) -> datetime:
    """Parse a compact 'YYYYMMDDTHHMM' token; raise RowParseError otherwise."""
    s = raw.strip()
    if not canon.RAW_TIMESTAMP_PATTERN.match(s):
        raise RowParseError(f"Timestamp {raw!r} does not match YYYYMMDDTHHMM.")
    try:
        return datetime.strptime(s, canon.RAW_TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise RowParseError(f"Timestamp {raw!r} is not a calendar date.") from exc


def parse_value(raw: str) -> float:
    s = raw.strip()
    if not _NUMBER.match(s):
        raise RowParseError(f"Value {raw!r} is not a decimal number.")
    value = float(s)
    if not math.isfinite(value):
        raise RowParseError(f"Value {raw!r} is not finite.")
    return value


def parse_record_strict(
    raw_timestamp: Optional[str], raw_value: Optional[str]
) -> Record:
    if not raw_timestamp or not raw_timestamp.strip():
        raise RowParseError("Empty timestamp field.")
    if not raw_value or not raw_value.strip():
        raise RowParseError("Empty value field.")
    timestamp = parse_timestamp(raw_timestamp)
    return Record(timestamp=timestamp, value=parse_value(raw_value))


def parse_record(
    raw_timestamp: Optional[str], raw_value: Optional[str]
) -> Optional[Record]:
    """
    Parse one raw row into a Record, or return None when it is malformed.

    Malformed rows are skipped by the loader, never raised.
    """
    try:
        return parse_record_strict(raw_timestamp, raw_value)
    except RowParseError:
        return None
