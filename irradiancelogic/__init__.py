from . import (
    canon,
    exceptions,
    types,
    parse,
    filters,
    aggregate,
    report,
    config,
    ingest,
    summary,
    cli,
)

__all__ = [
    "canon",
    "exceptions",
    "types",
    "parse",
    "filters",
    "aggregate",
    "report",
    "config",
    "ingest",
    "summary",
    "cli",
]
