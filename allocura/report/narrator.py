# allocura/report/narrator.py
from __future__ import annotations

import datetime
import re
import textwrap
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel

from allocura.clock import generated_stamp
from allocura.planner.allocator import PortfolioAllocation
from allocura.planner.explainer import AllocationExplanation
from allocura.planner.profile import UserProfile, profile_warnings
from allocura.planner.engine import profile_summary
from allocura.planner.parsers import parse_inr
from allocura.planner.sip import SipProjection
from allocura.report import guidance

REPORT_VERSION = "allocura-report-v1"
REPORT_WIDTH = 72
BAR_WIDTH = 40


class ProfileLine(BaseModel):
    label: str
    value: str

    class Config:
        extra = "forbid"


class AllocationLine(BaseModel):
    asset: str
    allocation: int
    reason: str
    examples: List[str]

    class Config:
        extra = "forbid"


class ReminderItem(BaseModel):
    title: str
    description: str

    class Config:
        extra = "forbid"


class PortfolioReport(BaseModel):
    reportVersion: str = REPORT_VERSION
    title: str
    tagline: str
    generatedAt: str
    profile: List[ProfileLine]
    allocations: List[AllocationLine]
    allocationTotal: int
    sipSummary: Optional[str] = None
    guidelines: List[str]
    reminders: List[ReminderItem]
    disclaimers: List[str]
    warnings: List[str]
    footer: List[str]

    class Config:
        extra = "forbid"


def _group_indian(digits: str) -> str:
    # 12345678 -> 1,23,45,678 (lakh/crore grouping)
    head, tail = digits[:-3], digits[-3:]
    if not head:
        return tail
    pairs = re.findall(r"\d{1,2}(?=(?:\d{2})*$)", head)
    return ",".join(pairs + [tail])


def format_inr(value: Any) -> str:
    amount = parse_inr(value) or 0.0
    whole, _, paise = f"{abs(amount):.2f}".rstrip("0").rstrip(".").partition(".")
    text = _group_indian(whole) + (f".{paise}" if paise else "")
    return f"-₹{text}" if amount < 0 else f"₹{text}"


def _profile_lines(profile: UserProfile) -> List[ProfileLine]:
    labels = {
        "ageGroup": "Age Group",
        "employmentType": "Employment",
        "incomeStability": "Income Stability",
        "monthlyInvestment": "Monthly Investment",
        "existingEMIs": "Existing EMIs",
        "emergencyFund": "Emergency Fund",
        "investmentHorizon": "Investment Horizon",
        "riskComfort": "Risk Comfort",
        "taxAwareness": "Tax Awareness",
        "goldPreference": "Gold Preference",
    }
    lines = []
    for row in profile_summary(profile):
        value = row["label"]
        if row["key"] == "monthlyInvestment" and row["value"]:
            amount = parse_inr(row["value"])
            value = format_inr(amount) if amount is not None else row["value"]
        lines.append(ProfileLine(label=labels[row["key"]], value=value))
    return lines


def _sip_summary(sip: SipProjection) -> str:
    return (
        f"Investing {format_inr(sip.monthlyAmount)} every month for {sip.years} years "
        f"at {sip.expectedReturnPct:g}% a year: invested {format_inr(sip.totalInvested)}, "
        f"estimated value {format_inr(sip.futureValue)} "
        f"(returns {format_inr(sip.estimatedReturns)}). {guidance.SIP_NOTICE}"
    )


def build_report(
    profile: UserProfile,
    allocation: PortfolioAllocation,
    explanations: Sequence[AllocationExplanation],
    sip: Optional[SipProjection] = None,
    generated_at: Optional[datetime.datetime] = None,
) -> PortfolioReport:
    allocations = [
        AllocationLine(
            asset=e.asset,
            allocation=e.allocation,
            reason=e.reason,
            examples=list(e.examples),
        )
        for e in explanations
    ]
    reminders = [
        ReminderItem(title=r["title"], description=r["description"]) for r in guidance.REMINDERS
    ]

    return PortfolioReport(
        title=guidance.APP_NAME,
        tagline=guidance.TAGLINE,
        generatedAt=generated_stamp(generated_at),
        profile=_profile_lines(profile),
        allocations=allocations,
        allocationTotal=allocation.total,
        sipSummary=_sip_summary(sip) if sip else None,
        guidelines=list(guidance.INVESTMENT_GUIDELINES),
        reminders=reminders,
        disclaimers=list(guidance.DISCLAIMERS),
        warnings=profile_warnings(profile),
        footer=[guidance.FOOTER_LINE, guidance.EDUCATIONAL_NOTICE],
    )


def _bar(pct: int) -> str:
    filled = int(round(BAR_WIDTH * max(0, min(pct, 100)) / 100.0))
    return "#" * filled + "." * (BAR_WIDTH - filled)


def _wrap(text: str, indent: str = "  ") -> List[str]:
    return textwrap.wrap(text, width=REPORT_WIDTH, initial_indent=indent, subsequent_indent=indent)


def render_text(report: PortfolioReport) -> str:
    lines: List[str] = []
    lines.append("=" * REPORT_WIDTH)
    lines.append(f"  {report.title}")
    lines.append(f"  {report.tagline}")
    lines.append("=" * REPORT_WIDTH)

    lines.append("")
    lines.append("Profile Summary")
    lines.append("-" * REPORT_WIDTH)
    for p in report.profile:
        lines.append(f"  {p.label + ':':<22}{p.value}")

    lines.append("")
    lines.append("Recommended Asset Allocation")
    lines.append("-" * REPORT_WIDTH)
    for a in report.allocations:
        lines.append(f"  {a.asset:<18} {_bar(a.allocation)} {a.allocation:>3}%")
    if report.allocationTotal != 100:
        lines.append(f"  (shares are rounded individually and total {report.allocationTotal}%)")

    lines.append("")
    lines.append("Allocation Breakdown & Rationale")
    lines.append("-" * REPORT_WIDTH)
    for a in report.allocations:
        lines.append(f"  {a.asset}: {a.allocation}%")
        lines.extend(_wrap(a.reason, indent="    "))
        lines.extend(_wrap("Examples: " + ", ".join(a.examples), indent="    "))
        lines.append("")

    if report.sipSummary:
        lines.append("SIP Projection")
        lines.append("-" * REPORT_WIDTH)
        lines.extend(_wrap(report.sipSummary))
        lines.append("")

    lines.append("Investment Guidelines")
    lines.append("-" * REPORT_WIDTH)
    for g in report.guidelines:
        lines.extend(_wrap(f"- {g}"))

    lines.append("")
    lines.append("Reminders")
    lines.append("-" * REPORT_WIDTH)
    for r in report.reminders:
        lines.extend(_wrap(f"- {r.title}: {r.description}"))

    if report.warnings:
        lines.append("")
        lines.append("Please check your answers")
        lines.append("-" * REPORT_WIDTH)
        for w in report.warnings:
            lines.extend(_wrap(f"- {w}"))

    lines.append("")
    lines.append("Important Disclaimers")
    lines.append("-" * REPORT_WIDTH)
    for d in report.disclaimers:
        lines.extend(_wrap(f"- {d}"))

    lines.append("")
    lines.append("=" * REPORT_WIDTH)
    lines.append(f"  {report.generatedAt}")
    for f in report.footer:
        lines.append(f"  {f}")
    return "\n".join(lines) + "\n"
