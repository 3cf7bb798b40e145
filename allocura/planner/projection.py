# allocura/planner/projection.py
from __future__ import annotations

import math
from typing import Dict, List, Optional

from allocura.config import get_settings
from allocura.planner.parsers import round_half_up

TRAJECTORY_POINTS = 16
START_VALUE = 100.0


def growth_trajectory(
    equity_pct: float,
    start_year: Optional[int] = None,
    points: int = TRAJECTORY_POINTS,
) -> List[Dict[str, int]]:
    """Illustrative value of ₹100 over time; more equity means faster growth and bigger swings.

    Not a forecast. The wobble is a fixed sine, so the series is deterministic.
    """
    if start_year is None:
        start_year = get_settings().trajectory_start

    base_growth = 1.06 + (equity_pct / 100.0) * 0.04
    volatility = 0.02 + (equity_pct / 100.0) * 0.03

    data: List[Dict[str, int]] = []
    for i in range(points):
        trend = math.pow(base_growth, i) * START_VALUE
        noise = math.sin(i * 1.5) * volatility * START_VALUE
        data.append({"year": start_year + i, "value": round_half_up(trend + noise)})
    return data
