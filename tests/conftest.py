from datetime import datetime

import pytest

from irradiancelogic.types import Record


@pytest.fixture
def scenario_rows():
    return [
        ("20230101T0000", "10.0"),
        ("20230101T1200", "20.0"),
        ("20230201T0000", "5.0"),
    ]


@pytest.fixture
def write_csv(tmp_path):
    """Write raw lines to a CSV file and return its path."""

    def _write(lines, name="export.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_csv(write_csv, scenario_rows):
    return write_csv([f"{ts},{value}" for ts, value in scenario_rows])


@pytest.fixture
def two_month_records():
    # 2023-01-02, 2023-01-09 and 2023-02-06 are Mondays
    return [
        Record(datetime(2023, 1, 2, 10, 0), 10.0),
        Record(datetime(2023, 1, 2, 14, 30), 20.0),
        Record(datetime(2023, 1, 3, 12, 0), 5.0),
        Record(datetime(2023, 1, 9, 11, 0), 30.0),
        Record(datetime(2023, 2, 6, 9, 15), 40.0),
        Record(datetime(2023, 2, 7, 13, 0), 1.0),
    ]
