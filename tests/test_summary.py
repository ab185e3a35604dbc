"""Tabular month/day breakdowns built with pandas."""

from irradiancelogic import aggregate, summary
from irradiancelogic.types import AggregationState


def test_to_frames_columns_and_order(two_month_records):
    frames = summary.to_frames(aggregate.aggregate(reversed(two_month_records)))
    months = frames["months"]
    assert list(months.columns) == ["month", "total", "count", "average"]
    assert months["month"].tolist() == ["2023-01", "2023-02"]
    assert months["total"].tolist() == [65.0, 41.0]
    assert months["count"].tolist() == [4, 2]
    assert months["average"].tolist() == [16.25, 20.5]

    days = frames["days"]
    assert days["day"].tolist() == sorted(days["day"].tolist())
    assert days.loc[days["day"] == "2023-01-02", "average"].item() == 15.0


def test_to_frames_empty_state():
    frames = summary.to_frames(AggregationState())
    assert frames["months"].empty
    assert list(frames["days"].columns) == ["day", "total", "count", "average"]


def test_summarise_payload(two_month_records):
    payload = summary.summarise(aggregate.aggregate(two_month_records))
    assert payload["meta"] == {
        "start": "2023-01-02",
        "end": "2023-02-07",
        "months": 2,
        "days": 5,
    }
    assert payload["stats"]["total"] == 106.0
    assert payload["stats"]["count"] == 6
    assert len(payload["datasets"]["days"]) == 5
    assert payload["datasets"]["months"][0]["month"] == "2023-01"


def test_summarise_empty():
    payload = summary.summarise(AggregationState())
    assert payload["meta"]["start"] == ""
    assert payload["stats"]["average"] == 0.0
    assert payload["datasets"]["months"] == []
