from __future__ import annotations
import csv
import logging
from contextlib import contextmanager
from importlib import resources
from pathlib import Path
from typing import IO, Iterator, Optional, Union

import pandas as pd

from . import canon
from .aggregate import accumulate
from .exceptions import SourceUnavailableError
from .filters import accepts
from .parse import parse_record
from .types import AggregationState, FilterSpec

logger = logging.getLogger(__name__)

Source = Union[str, Path, IO[str], None]


@contextmanager
def _open_source(source: Source) -> Iterator[IO[str]]:
    if source is not None and hasattr(source, "read"):
        # caller owns the stream
        yield source  # type: ignore[misc]
        return
    try:
        if source is None:
            fh = (
                resources.files(__package__)
                .joinpath(canon.DEFAULT_RESOURCE)
                .open("r", encoding="utf-8-sig", newline="")
            )
        else:
            fh = open(source, "r", encoding="utf-8-sig", newline="")
    except OSError as exc:
        raise SourceUnavailableError(f"Cannot open input source {source!r}.") from exc
    with fh:
        yield fh


def read_rows(source: Source = None) -> pd.DataFrame:
    """
    Read a two-field delimited source into a string frame.

    Columns: timestamp, value (both str, untrimmed). Rows with any other
    field count are dropped here; field contents are validated by the parser.
    Raises SourceUnavailableError if the source cannot be opened or read.
    """
    try:
        with _open_source(source) as fh:
            rows = [row for row in csv.reader(fh) if len(row) == len(canon.COLUMNS)]
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise SourceUnavailableError(f"Cannot read input source {source!r}.") from exc
    return pd.DataFrame.from_records(rows, columns=canon.COLUMNS).astype(str)


def load(source: Source = None, spec: Optional[FilterSpec] = None) -> AggregationState:
    """
    Parse, filter and accumulate a whole source into a fresh AggregationState.

    Malformed rows are skipped and counted; they never reach the state.
    """
    spec = spec or FilterSpec()
    rows = read_rows(source)
    state = AggregationState()
    rejected = filtered = 0
    for raw_ts, raw_value in rows.itertuples(index=False, name=None):
        record = parse_record(raw_ts, raw_value)
        if record is None:
            rejected += 1
            continue
        if not accepts(record, spec):
            filtered += 1
            continue
        accumulate(state, record)
    logger.debug(
        "Read %d rows: %d accepted, %d malformed, %d filtered out.",
        len(rows),
        state.count,
        rejected,
        filtered,
    )
    return state
