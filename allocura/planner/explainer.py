# allocura/planner/explainer.py
from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Tuple

from pydantic import BaseModel

from allocura.planner.allocator import ASSET_KEYS, PortfolioAllocation
from allocura.planner.profile import UserProfile
from allocura.planner.rules import Rule, field_in, first_match


class AllocationExplanation(BaseModel):
    asset: str
    allocation: int
    reason: str
    examples: Tuple[str, ...]
    color: str

    class Config:
        frozen = True
        extra = "forbid"


ASSET_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "equityETF": "Equity ETFs",
        "debtFunds": "Debt Funds",
        "liquidFunds": "Liquid Funds",
        "goldETF": "Gold ETFs / SGBs",
        "reits": "REITs",
    }
)

ASSET_EXAMPLES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "equityETF": ("Nifty 50 ETF", "Nifty Next 50 ETF", "Sensex ETF", "Nifty Midcap 150 ETF"),
        "debtFunds": ("Corporate Bond Funds", "Gilt Funds", "Short Duration Funds", "Banking & PSU Funds"),
        "liquidFunds": ("Overnight Funds", "Liquid Funds", "Money Market Funds", "Ultra Short Duration Funds"),
        "goldETF": ("Sovereign Gold Bonds (SGBs)", "Gold ETFs", "Gold Mutual Funds"),
        "reits": ("Embassy Office Parks REIT", "Mindspace REIT", "Brookfield India REIT"),
    }
)

ASSET_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "equityETF": "hsl(173, 58%, 39%)",
        "debtFunds": "hsl(210, 70%, 55%)",
        "liquidFunds": "hsl(200, 40%, 70%)",
        "goldETF": "hsl(43, 96%, 56%)",
        "reits": "hsl(280, 60%, 55%)",
    }
)

LEAD_INS: Mapping[str, str] = MappingProxyType(
    {
        "equityETF": "Equity ETFs provide long-term wealth creation through market participation. ",
        "debtFunds": "Debt funds provide stable returns with lower volatility. ",
        "liquidFunds": "Liquid funds provide instant liquidity with minimal risk. ",
        "goldETF": "Gold provides portfolio diversification and inflation hedge. ",
        "reits": "",
    }
)

# First matching rule wins; every chain ends in its default.

EQUITY_REASONS: Tuple[Rule[str], ...] = (
    Rule(
        "equity:young",
        "Your young age gives you time to ride out market volatility.",
        field_in("ageGroup", "18-25", "26-35"),
    ),
    Rule(
        "equity:high-risk",
        "Your higher risk appetite supports equity exposure for growth.",
        field_in("riskComfort", "high"),
    ),
    Rule("equity:default", "A moderate equity allocation balances growth potential with stability."),
)

DEBT_REASONS: Tuple[Rule[str], ...] = (
    Rule(
        "debt:weak-emergency",
        "Important for building stability before aggressive growth.",
        field_in("emergencyFund", "none", "partial"),
    ),
    Rule(
        "debt:short-horizon",
        "Your shorter horizon makes stable returns a priority.",
        field_in("investmentHorizon", "short", "medium"),
    ),
    Rule("debt:default", "Acts as portfolio ballast during market corrections."),
)

LIQUID_REASONS: Tuple[Rule[str], ...] = (
    Rule(
        "liquid:no-emergency",
        "Critical for building your emergency fund first.",
        field_in("emergencyFund", "none"),
    ),
    Rule(
        "liquid:variable-income",
        "Your variable income needs higher liquidity buffer.",
        field_in("incomeStability", "variable"),
    ),
    Rule("liquid:default", "Useful for rebalancing and opportunistic investments."),
)

GOLD_REASONS: Tuple[Rule[str], ...] = (
    Rule(
        "gold:preferred",
        "Aligned with your preference for this traditional safe asset.",
        field_in("goldPreference", "yes"),
    ),
    Rule("gold:default", "A small allocation adds diversification without currency risk."),
)

REIT_REASONS: Tuple[Rule[str], ...] = (
    Rule(
        "reits:default",
        "REITs provide exposure to real estate through regulated instruments with regular income potential.",
    ),
)

REASON_CHAINS: Mapping[str, Tuple[Rule[str], ...]] = MappingProxyType(
    {
        "equityETF": EQUITY_REASONS,
        "debtFunds": DEBT_REASONS,
        "liquidFunds": LIQUID_REASONS,
        "goldETF": GOLD_REASONS,
        "reits": REIT_REASONS,
    }
)


def rationale(asset_key: str, profile: UserProfile) -> str:
    rule = first_match(REASON_CHAINS[asset_key], profile)
    return LEAD_INS[asset_key] + rule.outcome


def explain(profile: UserProfile, allocation: PortfolioAllocation) -> List[AllocationExplanation]:
    """One card per asset class with a positive share, in the fixed asset order."""
    explanations: List[AllocationExplanation] = []
    for key in ASSET_KEYS:
        pct = getattr(allocation, key)
        if pct <= 0:
            continue
        explanations.append(
            AllocationExplanation(
                asset=ASSET_LABELS[key],
                allocation=pct,
                reason=rationale(key, profile),
                examples=ASSET_EXAMPLES[key],
                color=ASSET_COLORS[key],
            )
        )
    return explanations
