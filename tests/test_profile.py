"""Tests for profile parsing and validation."""

import pytest

from allocura.exceptions import AllocuraError, InvalidProfileField
from allocura.planner.profile import (
    UserProfile,
    monthly_investment_amount,
    parse_profile,
    profile_warnings,
)

GOOD_ANSWERS = {
    "ageGroup": "36-45",
    "employmentType": "salaried",
    "incomeStability": "stable",
    "monthlyInvestment": "₹2,500",
    "existingEMIs": "low",
    "emergencyFund": "adequate",
    "investmentHorizon": "medium",
    "riskComfort": "medium",
    "taxAwareness": "yes",
    "goldPreference": "no",
}


def test_parse_profile_strips_and_drops_unknown_keys():
    answers = dict(GOOD_ANSWERS, ageGroup=" 36-45 ", monthlyIncome="50k-1L")
    profile = parse_profile(answers)
    assert profile.ageGroup == "36-45"
    assert not hasattr(profile, "monthlyIncome")


def test_parse_profile_missing_values_become_empty():
    profile = parse_profile({"ageGroup": "18-25", "riskComfort": None})
    assert profile.riskComfort == ""
    assert profile.goldPreference == ""


def test_strict_parse_accepts_known_answers():
    profile = parse_profile(GOOD_ANSWERS, strict=True)
    assert monthly_investment_amount(profile) == 2500.0


def test_strict_parse_rejects_unknown_option():
    with pytest.raises(InvalidProfileField) as excinfo:
        parse_profile(dict(GOOD_ANSWERS, riskComfort="extreme"), strict=True)
    err = excinfo.value
    assert err.field == "riskComfort"
    assert err.value == "extreme"
    assert err.allowed == ("low", "medium", "high")
    assert isinstance(err, AllocuraError)
    assert isinstance(err, ValueError)


def test_strict_parse_rejects_non_numeric_amount():
    with pytest.raises(InvalidProfileField, match="monthlyInvestment"):
        parse_profile(dict(GOOD_ANSWERS, monthlyInvestment="custom"), strict=True)


def test_profile_is_frozen():
    profile = UserProfile(ageGroup="18-25")
    with pytest.raises((TypeError, ValueError)):
        profile.ageGroup = "55+"


def test_no_warnings_for_clean_profile():
    assert profile_warnings(parse_profile(GOOD_ANSWERS)) == []


def test_warnings_for_unknown_and_missing_values():
    profile = parse_profile(dict(GOOD_ANSWERS, ageGroup="60-70", goldPreference=""))
    warnings = profile_warnings(profile)
    assert any(w.startswith("Unknown ageGroup='60-70'") for w in warnings)
    assert "Missing goldPreference (default branch used)." in warnings


def test_warning_for_amount_below_minimum():
    profile = parse_profile(dict(GOOD_ANSWERS, monthlyInvestment="200"))
    assert profile_warnings(profile) == ["monthlyInvestment 200 is below the minimum of 500."]


def test_minimum_amount_configurable(monkeypatch):
    monkeypatch.setenv("ALLOCURA_MIN_MONTHLY_INR", "100")
    profile = parse_profile(dict(GOOD_ANSWERS, monthlyInvestment="200"))
    assert profile_warnings(profile) == []


def test_warning_for_unparseable_amount():
    profile = parse_profile(dict(GOOD_ANSWERS, monthlyInvestment="lots"))
    assert profile_warnings(profile) == ["monthlyInvestment='lots' is not a rupee amount."]


def test_profile_accepts_numeric_amount():
    profile = UserProfile(ageGroup="26-35", monthlyInvestment=5000)
    assert profile.monthlyInvestment == "5000"
    assert monthly_investment_amount(profile) == 5000


def test_profile_strips_direct_values():
    profile = UserProfile(ageGroup=" 26-35 ", riskComfort=None)
    assert profile.ageGroup == "26-35"
    assert profile.riskComfort == ""
