# allocura/planner/questions.py
from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel


class Option(BaseModel):
    value: str
    label: str
    description: Optional[str] = None

    class Config:
        frozen = True
        extra = "forbid"


class QuestionStep(BaseModel):
    key: str
    question: str
    subtitle: str
    options: Tuple[Option, ...]
    freeForm: bool = False

    class Config:
        frozen = True
        extra = "forbid"


def _opts(*rows: Tuple[str, ...]) -> Tuple[Option, ...]:
    out = []
    for row in rows:
        value, label = row[0], row[1]
        description = row[2] if len(row) > 2 else None
        out.append(Option(value=value, label=label, description=description))
    return tuple(out)


AGE_OPTIONS = _opts(
    ("18-25", "18-25 years"),
    ("26-35", "26-35 years"),
    ("36-45", "36-45 years"),
    ("46-55", "46-55 years"),
    ("55+", "55+ years"),
)

EMPLOYMENT_OPTIONS = _opts(
    ("salaried", "Salaried", "Regular monthly salary"),
    ("self-employed", "Self-employed", "Business or freelance income"),
    ("student", "Student", "Currently studying"),
    ("retired", "Retired", "Pension or savings based"),
)

INCOME_STABILITY_OPTIONS = _opts(
    ("stable", "Stable", "Consistent monthly income"),
    ("variable", "Variable", "Income fluctuates month-to-month"),
)

MONTHLY_INVESTMENT_OPTIONS = _opts(
    ("1000", "₹1,000", "Good starting point"),
    ("2500", "₹2,500", "Popular choice"),
    ("5000", "₹5,000", "Solid commitment"),
    ("10000", "₹10,000", "Serious investor"),
    ("15000", "₹15,000", "High commitment"),
    ("custom", "Custom Amount", "Enter your own amount"),
)

EMI_OPTIONS = _opts(
    ("none", "No EMIs", "No ongoing loan obligations"),
    ("low", "Low EMIs", "Less than 20% of income"),
    ("moderate", "Moderate EMIs", "20-40% of income"),
    ("high", "High EMIs", "More than 40% of income"),
)

EMERGENCY_FUND_OPTIONS = _opts(
    ("none", "Not yet built", "Less than 1 month expenses"),
    ("partial", "Partially built", "1-3 months expenses covered"),
    ("adequate", "Adequately built", "3-6 months expenses covered"),
    ("strong", "Strongly built", "More than 6 months expenses"),
)

HORIZON_OPTIONS = _opts(
    ("short", "Short-term", "Less than 3 years"),
    ("medium", "Medium-term", "3-7 years"),
    ("long", "Long-term", "More than 7 years"),
)

RISK_OPTIONS = _opts(
    ("low", "Low Risk", "Prefer stability, okay with lower returns"),
    ("medium", "Medium Risk", "Balance between growth and safety"),
    ("high", "High Risk", "Accept volatility for higher returns"),
)

TAX_OPTIONS = _opts(
    ("yes", "Yes", "Aware of Section 80C, ELSS, etc."),
    ("no", "No", "Not familiar with tax-saving options"),
)

GOLD_OPTIONS = _opts(
    ("yes", "Yes", "Value gold as a safe asset"),
    ("no", "No", "Not particularly interested in gold"),
)

STEPS: Tuple[QuestionStep, ...] = (
    QuestionStep(
        key="ageGroup",
        question="What's your age group?",
        subtitle="This helps us understand your investment timeline",
        options=AGE_OPTIONS,
    ),
    QuestionStep(
        key="employmentType",
        question="What's your employment type?",
        subtitle="Understanding your income source",
        options=EMPLOYMENT_OPTIONS,
    ),
    QuestionStep(
        key="incomeStability",
        question="How stable is your income?",
        subtitle="This affects how much liquidity you need",
        options=INCOME_STABILITY_OPTIONS,
    ),
    QuestionStep(
        key="monthlyInvestment",
        question="What amount is comfortable for you to invest each month?",
        subtitle="Choose what feels affordable - you can always adjust this later",
        options=MONTHLY_INVESTMENT_OPTIONS,
        freeForm=True,
    ),
    QuestionStep(
        key="existingEMIs",
        question="Do you have existing EMIs?",
        subtitle="Loan obligations impact investable surplus",
        options=EMI_OPTIONS,
    ),
    QuestionStep(
        key="emergencyFund",
        question="How's your emergency fund?",
        subtitle="Financial safety net before investing",
        options=EMERGENCY_FUND_OPTIONS,
    ),
    QuestionStep(
        key="investmentHorizon",
        question="What's your investment horizon?",
        subtitle="How long can you stay invested?",
        options=HORIZON_OPTIONS,
    ),
    QuestionStep(
        key="riskComfort",
        question="What's your risk comfort level?",
        subtitle="How do you feel about market ups and downs?",
        options=RISK_OPTIONS,
    ),
    QuestionStep(
        key="taxAwareness",
        question="Are you aware of tax-saving investments?",
        subtitle="ELSS, 80C benefits, etc.",
        options=TAX_OPTIONS,
    ),
    QuestionStep(
        key="goldPreference",
        question="Do you prefer gold in your portfolio?",
        subtitle="Traditional safe-haven asset",
        options=GOLD_OPTIONS,
    ),
)

STEP_KEYS: Tuple[str, ...] = tuple(step.key for step in STEPS)

_STEPS_BY_KEY: Dict[str, QuestionStep] = {step.key: step for step in STEPS}


def get_step(key: str) -> QuestionStep:
    try:
        return _STEPS_BY_KEY[key]
    except KeyError:
        raise KeyError(f"Unknown question: {key}") from None


def allowed_values(key: str) -> Optional[Tuple[str, ...]]:
    """Option values for ``key``, or None when the answer is free-form."""
    step = get_step(key)
    if step.freeForm:
        return None
    return tuple(opt.value for opt in step.options)


def option_label(key: str, value: str) -> str:
    """Display label for an answer; falls back to the raw value."""
    step = _STEPS_BY_KEY.get(key)
    if step is None:
        return value
    for opt in step.options:
        if opt.value == value:
            return opt.label
    return value
