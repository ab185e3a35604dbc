"""Reading delimited exports and loading them into an AggregationState."""

import io
from datetime import datetime

import pytest

import irradiancelogic as il
from irradiancelogic.exceptions import SourceUnavailableError
from irradiancelogic.types import FilterSpec


def test_read_rows_keeps_only_two_field_rows(write_csv):
    path = write_csv(
        [
            "20230101T0000,10.0",
            "20230101T0100",
            "20230101T0200,1,2",
            "",
            "20230101T0300,",
            "20230101T0400,4.0",
        ]
    )
    rows = il.ingest.read_rows(path)
    assert list(rows.columns) == ["timestamp", "value"]
    assert rows.values.tolist() == [
        ["20230101T0000", "10.0"],
        ["20230101T0300", ""],
        ["20230101T0400", "4.0"],
    ]


def test_read_rows_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    rows = il.ingest.read_rows(path)
    assert rows.empty
    assert list(rows.columns) == ["timestamp", "value"]


def test_read_rows_from_stream():
    rows = il.ingest.read_rows(io.StringIO("20230101T0000,1.0\n"))
    assert len(rows) == 1


def test_missing_source_raises(tmp_path):
    with pytest.raises(SourceUnavailableError):
        il.ingest.load(tmp_path / "missing.csv")


def test_load_scenario_a(scenario_csv):
    state = il.ingest.load(scenario_csv)
    assert state.total == 35.0
    assert state.count == 3
    assert state.month_total == {"2023-01": 30.0, "2023-02": 5.0}
    assert state.day_total["2023-01-01"] == 30.0


def test_load_scenario_b(scenario_csv):
    spec = FilterSpec(datetime(2023, 1, 1), datetime(2023, 1, 31, 23, 59, 59))
    state = il.ingest.load(scenario_csv, spec)
    assert state.total == 30.0
    assert "2023-02" not in state.month_total


def test_load_skips_malformed_rows(write_csv, caplog):
    path = write_csv(
        [
            "20230101T0000,10.0",
            "20230101T0100,",
            "not-a-date,3.0",
            "20230101T0200,abc",
        ]
    )
    caplog.set_level("DEBUG", logger="irradiancelogic")
    state = il.ingest.load(path)
    assert state.total == 10.0
    assert state.count == 1
    assert "3 malformed" in caplog.text


def test_load_bundled_dataset():
    state = il.ingest.load()
    # 59 days x 7 readings; the trailing malformed rows are dropped
    assert state.count == 413
    assert state.months() == ["2023-01", "2023-02"]
    assert len(state.days()) == 59


def test_load_ignores_leading_byte_order_mark(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes("20230101T0000,10.0\n20230102T0000,5.0\n".encode("utf-8-sig"))
    rows = il.ingest.read_rows(path)
    assert rows["timestamp"].iloc[0] == "20230101T0000"
    state = il.ingest.load(path)
    assert state.count == 2
    assert state.total == 15.0
