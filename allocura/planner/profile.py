# allocura/planner/profile.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, validator

from allocura.config import get_settings
from allocura.exceptions import InvalidProfileField
from allocura.planner.parsers import parse_inr
from allocura.planner.questions import STEP_KEYS, allowed_values

logger = logging.getLogger(__name__)


class UserProfile(BaseModel):
    """Answers collected by the onboarding questionnaire.

    Values are kept as the raw option strings. Anything outside the known
    option sets is accepted here; the allocator falls back to its default
    branch for it and ``profile_warnings`` reports it.
    """

    ageGroup: str = ""
    employmentType: str = ""
    incomeStability: str = ""
    monthlyInvestment: str = ""
    existingEMIs: str = ""
    emergencyFund: str = ""
    investmentHorizon: str = ""
    riskComfort: str = ""
    taxAwareness: str = ""
    goldPreference: str = ""

    class Config:
        frozen = True
        extra = "ignore"

    @validator("*", pre=True)
    def stringify_answers(cls, value: Any) -> str:
        return _clean(value)


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def monthly_investment_amount(profile: UserProfile) -> Optional[float]:
    return parse_inr(profile.monthlyInvestment)


def profile_warnings(profile: UserProfile, min_monthly_inr: Optional[float] = None) -> List[str]:
    warnings: List[str] = []
    if min_monthly_inr is None:
        min_monthly_inr = get_settings().min_monthly_inr

    for key in STEP_KEYS:
        value = getattr(profile, key)
        allowed = allowed_values(key)
        if allowed is None:
            continue
        if value == "":
            warnings.append(f"Missing {key} (default branch used).")
        elif value not in allowed:
            warnings.append(
                f"Unknown {key}={value!r} (expected one of {', '.join(allowed)}; default branch used)."
            )

    raw_amount = profile.monthlyInvestment
    if raw_amount == "":
        warnings.append("Missing monthlyInvestment.")
    else:
        amount = parse_inr(raw_amount)
        if amount is None:
            warnings.append(f"monthlyInvestment={raw_amount!r} is not a rupee amount.")
        elif amount < min_monthly_inr:
            warnings.append(
                f"monthlyInvestment {amount:g} is below the minimum of {min_monthly_inr:g}."
            )

    return warnings


def parse_profile(answers: Mapping[str, Any], strict: bool = False) -> UserProfile:
    """Build a profile from raw onboarding answers.

    Values are stripped and stringified; unknown keys are dropped. With
    ``strict=True`` the first answer outside its option set raises
    ``InvalidProfileField``.
    """
    data: Dict[str, str] = {}
    for key in STEP_KEYS:
        data[key] = _clean(answers.get(key))

    if strict:
        for key in STEP_KEYS:
            allowed = allowed_values(key)
            value = data[key]
            if allowed is None:
                if parse_inr(value) is None:
                    raise InvalidProfileField(key, value)
                continue
            if value not in allowed:
                raise InvalidProfileField(key, value, allowed)

    profile = UserProfile(**data)
    logger.debug("Parsed profile: %s", data)
    return profile
