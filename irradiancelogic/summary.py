from __future__ import annotations
from typing import Dict

import numpy as np
import pandas as pd

from .report import average
from .types import AggregationState


def _breakdown(totals: Dict[str, float], counts: Dict[str, int], label: str) -> pd.DataFrame:
    keys = sorted(totals)
    out = pd.DataFrame(
        {
            label: pd.Series(keys, dtype=str),
            "total": pd.Series([totals[k] for k in keys], dtype=float),
            "count": pd.Series([counts.get(k, 0) for k in keys], dtype=int),
        }
    )
    total = out["total"].to_numpy(dtype=float)
    count = out["count"].to_numpy(dtype=float)
    out["average"] = np.divide(
        total, count, out=np.zeros_like(total), where=count != 0
    )
    return out


def to_frames(state: AggregationState) -> Dict[str, pd.DataFrame]:
    """
    Tabular month/day breakdowns of an AggregationState.

    Each frame: label column ('month' / 'day'), total, count, average,
    sorted ascending by label.
    """
    return {
        "months": _breakdown(state.month_total, state.month_count, "month"),
        "days": _breakdown(state.day_total, state.day_count, "day"),
    }


def summarise(state: AggregationState) -> dict:
    frames = to_frames(state)
    days = frames["days"]["day"]
    return {
        "meta": {
            "start": str(days.iloc[0]) if len(days) else "",
            "end": str(days.iloc[-1]) if len(days) else "",
            "months": int(len(frames["months"])),
            "days": int(len(days)),
        },
        "stats": {
            "total": float(state.total),
            "count": int(state.count),
            "average": float(average(state.total, state.count)),
        },
        "datasets": {
            "months": frames["months"].to_dict(orient="records"),
            "days": frames["days"].to_dict(orient="records"),
        },
    }
