# allocura/planner/parsers.py
from __future__ import annotations

import math
import re
from typing import Any, Optional


_CLEAN_RE = re.compile(r"[,\s]")
_RUPEE_RE = re.compile(r"[₹]|rs\.?|inr", re.IGNORECASE)


def parse_inr(value: Any) -> Optional[float]:
    """
    Robust INR parser.
    Handles:
      - 5000, "5000", "5,000", "1,00,000"
      - "₹5,000", "Rs. 5000", "INR 5000"
      - "1.5L", "2 Lakhs", "1 Crore", "1 Cr", "10k"
    Returns float rupees or None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if math.isnan(float(value)):
            return None
        return float(value)

    s = str(value).strip()
    if not s:
        return None

    s = _RUPEE_RE.sub("", s).strip().lower()
    s = _CLEAN_RE.sub("", s)

    s = s.replace("lakhs", "lakh").replace("lacs", "lakh").replace("crores", "crore")

    m = re.match(r"^([0-9]*\.?[0-9]+)(k|l|lakh|crore|cr)$", s)
    if m:
        num = float(m.group(1))
        unit = m.group(2)
        if unit == "k":
            return num * 1000.0
        if unit in ("l", "lakh"):
            return num * 100000.0
        return num * 10000000.0

    try:
        parsed = float(s)
    except ValueError:
        return None
    if math.isnan(parsed) or math.isinf(parsed):
        return None
    return parsed


def round_half_up(value: float) -> int:
    # matches the onboarding app's rounding; Python's round() is banker's
    return int(math.floor(value + 0.5))


def monthly_rate_from_annual(annual_return_pct: float) -> float:
    # Nominal monthly rate, as the SIP calculator quotes it
    return annual_return_pct / 100.0 / 12.0
