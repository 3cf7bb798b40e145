# allocura/planner/engine.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from allocura.config import get_settings
from allocura.planner.allocator import PortfolioAllocation, allocate, allocation_trace
from allocura.planner.explainer import AllocationExplanation, explain
from allocura.planner.profile import UserProfile, monthly_investment_amount, profile_warnings
from allocura.planner.projection import growth_trajectory
from allocura.planner.questions import STEP_KEYS, get_step, option_label
from allocura.planner.sip import SipProjection, sip_future_value

logger = logging.getLogger(__name__)


def profile_summary(profile: UserProfile) -> List[Dict[str, str]]:
    rows = []
    for key in STEP_KEYS:
        value = getattr(profile, key)
        rows.append(
            {
                "key": key,
                "question": get_step(key).question,
                "value": value,
                "label": option_label(key, value) if value else "-",
            }
        )
    return rows


def _sip_for(profile: UserProfile, monthly_investment: Optional[float]) -> Optional[SipProjection]:
    amount = monthly_investment if monthly_investment is not None else monthly_investment_amount(profile)
    if amount is None or amount < get_settings().min_monthly_inr:
        return None
    try:
        return sip_future_value(amount)
    except ValueError as exc:
        logger.warning("SIP projection skipped: %s", exc)
        return None


def generate_portfolio(
    profile: UserProfile,
    monthly_investment: Optional[float] = None,
    rounding: Optional[str] = None,
) -> Dict[str, Any]:
    allocation = allocate(profile, rounding=rounding)
    explanations = explain(profile, allocation)
    sip = _sip_for(profile, monthly_investment)

    def explanation_to_dict(e: AllocationExplanation) -> Dict[str, Any]:
        return {
            "asset": e.asset,
            "allocation": e.allocation,
            "reason": e.reason,
            "examples": list(e.examples),
            "color": e.color,
        }

    return {
        "profileSummary": profile_summary(profile),
        "allocation": allocation.as_pct(),
        "allocationTotal": allocation.total,
        "explanations": [explanation_to_dict(e) for e in explanations],
        "trace": allocation_trace(profile),
        "sip": sip.dict() if sip else None,
        "growthTrajectory": growth_trajectory(allocation.equityETF),
        "warnings": profile_warnings(profile),
    }


def build_portfolio(
    profile: UserProfile, rounding: Optional[str] = None
) -> Tuple[PortfolioAllocation, List[AllocationExplanation]]:
    allocation = allocate(profile, rounding=rounding)
    return allocation, explain(profile, allocation)
