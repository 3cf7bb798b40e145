"""Tests for the onboarding questionnaire catalogue."""

import pytest

from allocura.planner.questions import STEP_KEYS, STEPS, allowed_values, get_step, option_label


def test_ten_steps_in_onboarding_order():
    assert STEP_KEYS == (
        "ageGroup",
        "employmentType",
        "incomeStability",
        "monthlyInvestment",
        "existingEMIs",
        "emergencyFund",
        "investmentHorizon",
        "riskComfort",
        "taxAwareness",
        "goldPreference",
    )
    assert len(STEPS) == 10


def test_allowed_values():
    assert allowed_values("ageGroup") == ("18-25", "26-35", "36-45", "46-55", "55+")
    assert allowed_values("existingEMIs") == ("none", "low", "moderate", "high")
    assert allowed_values("monthlyInvestment") is None


def test_option_label_falls_back_to_value():
    assert option_label("emergencyFund", "partial") == "Partially built"
    assert option_label("emergencyFund", "plenty") == "plenty"
    assert option_label("notAQuestion", "x") == "x"


def test_get_step_unknown_key():
    with pytest.raises(KeyError):
        get_step("favouriteColour")


def test_monthly_investment_has_custom_option():
    step = get_step("monthlyInvestment")
    assert step.freeForm is True
    assert step.options[-1].value == "custom"
