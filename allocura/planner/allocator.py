# allocura/planner/allocator.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

from allocura.config import (
    ROUNDING_INDEPENDENT,
    ROUNDING_LARGEST_REMAINDER,
    ROUNDING_MODES,
    get_settings,
)
from allocura.planner.parsers import round_half_up
from allocura.planner.profile import UserProfile
from allocura.planner.rules import Rule, field_in, first_match

logger = logging.getLogger(__name__)

# Fixed order used everywhere: totals, normalisation, explanations.
ASSET_KEYS: Tuple[str, ...] = ("equityETF", "debtFunds", "liquidFunds", "goldETF", "reits")

FLOORS: Mapping[str, int] = MappingProxyType(
    {
        "equityETF": 5,
        "debtFunds": 5,
        "liquidFunds": 5,
        "goldETF": 0,
        "reits": 0,
    }
)


class PortfolioAllocation(BaseModel):
    equityETF: int = Field(ge=0)
    debtFunds: int = Field(ge=0)
    liquidFunds: int = Field(ge=0)
    goldETF: int = Field(ge=0)
    reits: int = Field(ge=0)

    class Config:
        frozen = True
        extra = "forbid"

    @property
    def total(self) -> int:
        return sum(getattr(self, k) for k in ASSET_KEYS)

    def as_pct(self) -> Dict[str, int]:
        return {k: getattr(self, k) for k in ASSET_KEYS}


@dataclass(frozen=True)
class Deltas:
    equity: int = 0
    debt: int = 0
    liquid: int = 0
    gold: int = 0
    reits: int = 0

    def as_tuple(self) -> Tuple[int, int, int, int, int]:
        return (self.equity, self.debt, self.liquid, self.gold, self.reits)


NO_CHANGE = Deltas()


# ---------- Base presets ----------

AGE_PRESETS: Mapping[str, Deltas] = MappingProxyType(
    {
        "18-25": Deltas(equity=70, debt=15, liquid=10, gold=5),
        "26-35": Deltas(equity=60, debt=20, liquid=10, gold=10),
        "36-45": Deltas(equity=50, debt=25, liquid=10, gold=10, reits=5),
        "46-55": Deltas(equity=35, debt=35, liquid=15, gold=10, reits=5),
        "55+": Deltas(equity=20, debt=40, liquid=25, gold=10, reits=5),
    }
)

# Catch-all for an age group outside the five brackets.
DEFAULT_PRESET = Deltas(equity=50, debt=25, liquid=15, gold=10)


# ---------- Adjustment chains (applied in this order) ----------

INCOME_RULES: Tuple[Rule[Deltas], ...] = (
    Rule("income:variable", Deltas(equity=-10, liquid=10), field_in("incomeStability", "variable")),
    Rule("income:default", NO_CHANGE),
)

EMI_RULES: Tuple[Rule[Deltas], ...] = (
    Rule("emi:high", Deltas(equity=-10, liquid=5, debt=5), field_in("existingEMIs", "high")),
    Rule("emi:moderate", Deltas(equity=-5, liquid=5), field_in("existingEMIs", "moderate")),
    Rule("emi:default", NO_CHANGE),
)

EMERGENCY_RULES: Tuple[Rule[Deltas], ...] = (
    Rule("emergency:none", Deltas(equity=-15, liquid=15), field_in("emergencyFund", "none")),
    Rule("emergency:partial", Deltas(equity=-5, liquid=5), field_in("emergencyFund", "partial")),
    Rule("emergency:default", NO_CHANGE),
)

HORIZON_RULES: Tuple[Rule[Deltas], ...] = (
    Rule("horizon:short", Deltas(equity=-20, debt=10, liquid=10), field_in("investmentHorizon", "short")),
    Rule("horizon:medium", Deltas(equity=-10, debt=10), field_in("investmentHorizon", "medium")),
    Rule("horizon:default", NO_CHANGE),
)

RISK_RULES: Tuple[Rule[Deltas], ...] = (
    Rule("risk:low", Deltas(equity=-15, debt=10, gold=5), field_in("riskComfort", "low")),
    Rule("risk:high", Deltas(equity=10, debt=-10), field_in("riskComfort", "high")),
    Rule("risk:default", NO_CHANGE),
)

GOLD_RULES: Tuple[Rule[Deltas], ...] = (
    Rule("gold:yes", Deltas(gold=5, equity=-5), field_in("goldPreference", "yes")),
    Rule("gold:default", NO_CHANGE),
)

ADJUSTMENT_CHAINS: Tuple[Tuple[Rule[Deltas], ...], ...] = (
    INCOME_RULES,
    EMI_RULES,
    EMERGENCY_RULES,
    HORIZON_RULES,
    RISK_RULES,
    GOLD_RULES,
)


# ---------- Steps ----------

def base_preset(profile: UserProfile) -> Tuple[str, Deltas]:
    preset = AGE_PRESETS.get(profile.ageGroup)
    if preset is None:
        return "age:default", DEFAULT_PRESET
    return f"age:{profile.ageGroup}", preset


def _apply(totals: List[int], deltas: Deltas) -> None:
    for i, d in enumerate(deltas.as_tuple()):
        totals[i] += d


def raw_totals(profile: UserProfile) -> Tuple[List[int], List[str]]:
    """Running totals after the base preset and all adjustments, before clamping.

    Returns the totals (in ASSET_KEYS order) and the names of the rules that
    matched, in application order.
    """
    name, preset = base_preset(profile)
    totals = list(preset.as_tuple())
    applied = [name]
    for chain in ADJUSTMENT_CHAINS:
        rule = first_match(chain, profile)
        _apply(totals, rule.outcome)
        if rule.outcome != NO_CHANGE:
            applied.append(rule.name)
    return totals, applied


def clamp_floors(totals: List[int]) -> Tuple[List[int], List[str]]:
    clamped: List[int] = []
    hit: List[str] = []
    for key, value in zip(ASSET_KEYS, totals):
        floor = FLOORS[key]
        if value < floor:
            hit.append(key)
            logger.debug("Clamped %s from %s to floor %s", key, value, floor)
            value = floor
        clamped.append(value)
    return clamped, hit


def _normalize_independent(values: List[int]) -> List[int]:
    total = sum(values)
    factor = 100 / total
    return [round_half_up(v * factor) for v in values]


def _normalize_largest_remainder(values: List[int]) -> List[int]:
    total = sum(values)
    # Exact integer arithmetic: share_i = v_i * 100 / total
    floors = [(v * 100) // total for v in values]
    remainders = [(v * 100) % total for v in values]
    leftover = 100 - sum(floors)
    order = sorted(range(len(values)), key=lambda i: (-remainders[i], i))
    for i in order[:leftover]:
        floors[i] += 1
    return floors


def normalize(values: List[int], rounding: str = ROUNDING_INDEPENDENT) -> List[int]:
    """Scale clamped totals to percentages.

    ``independent`` rounds each share half-up on its own, so the result can
    be off 100 by up to 2. ``largest_remainder`` always sums to 100.
    """
    if rounding == ROUNDING_INDEPENDENT:
        return _normalize_independent(values)
    if rounding == ROUNDING_LARGEST_REMAINDER:
        return _normalize_largest_remainder(values)
    raise ValueError(f"Unknown rounding mode {rounding!r}; expected one of {', '.join(ROUNDING_MODES)}")


def allocation_trace(profile: UserProfile) -> List[str]:
    """Names of the preset, the matching rules and any floor clamps, in order."""
    totals, applied = raw_totals(profile)
    _, hit = clamp_floors(totals)
    return applied + [f"floor:{key}" for key in hit]


def allocate(profile: UserProfile, rounding: Optional[str] = None) -> PortfolioAllocation:
    if rounding is None:
        rounding = get_settings().rounding

    totals, _ = raw_totals(profile)
    clamped, _ = clamp_floors(totals)
    shares = normalize(clamped, rounding)

    residual = sum(shares) - 100
    if residual:
        logger.debug("Rounding residual %+d (mode=%s, shares=%s)", residual, rounding, shares)

    return PortfolioAllocation(**dict(zip(ASSET_KEYS, shares)))

