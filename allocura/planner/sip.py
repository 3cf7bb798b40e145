# allocura/planner/sip.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from allocura.config import get_settings
from allocura.planner.parsers import monthly_rate_from_annual, round_half_up

MIN_YEARS = 1
MAX_YEARS = 30
MIN_RETURN_PCT = 1.0
MAX_RETURN_PCT = 25.0


class SipProjection(BaseModel):
    monthlyAmount: float
    years: int
    expectedReturnPct: float
    totalInvested: float
    futureValue: int
    estimatedReturns: int

    class Config:
        frozen = True
        extra = "forbid"


def _future_value(monthly_amount: float, months: int, monthly_rate: float) -> float:
    """
    Future value of a SIP paid at the start of each month (annuity due).
    FV = P * (((1 + r)^n - 1) / r) * (1 + r)
    """
    if months <= 0:
        raise ValueError("months must be positive")
    if monthly_rate == 0:
        return monthly_amount * months
    growth = (1.0 + monthly_rate) ** months
    return monthly_amount * ((growth - 1.0) / monthly_rate) * (1.0 + monthly_rate)


def sip_future_value(
    monthly_amount: float,
    years: Optional[int] = None,
    expected_return_pct: Optional[float] = None,
    validate: bool = True,
) -> SipProjection:
    settings = get_settings()
    if years is None:
        years = settings.sip_years
    if expected_return_pct is None:
        expected_return_pct = settings.sip_return_pct

    if validate:
        if monthly_amount < settings.min_monthly_inr:
            raise ValueError(f"monthly_amount must be at least {settings.min_monthly_inr:g}")
        if not MIN_YEARS <= years <= MAX_YEARS:
            raise ValueError(f"years must be between {MIN_YEARS} and {MAX_YEARS}")
        if not MIN_RETURN_PCT <= expected_return_pct <= MAX_RETURN_PCT:
            raise ValueError(
                f"expected_return_pct must be between {MIN_RETURN_PCT:g} and {MAX_RETURN_PCT:g}"
            )

    months = years * 12
    future_value = _future_value(monthly_amount, months, monthly_rate_from_annual(expected_return_pct))
    total_invested = monthly_amount * months

    return SipProjection(
        monthlyAmount=monthly_amount,
        years=years,
        expectedReturnPct=expected_return_pct,
        totalInvested=total_invested,
        futureValue=round_half_up(future_value),
        estimatedReturns=round_half_up(future_value - total_invested),
    )
