"""Shared fixtures for allocura tests."""

import pytest

from allocura.planner.profile import UserProfile

ENV_VARS = (
    "ALLOCURA_ROUNDING",
    "ALLOCURA_TIMEZONE",
    "ALLOCURA_MIN_MONTHLY_INR",
    "ALLOCURA_SIP_RETURN_PCT",
    "ALLOCURA_SIP_YEARS",
    "ALLOCURA_TRAJECTORY_START",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env from leaking into test expectations."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def steady_profile():
    """26-35, nothing that triggers an adjustment."""
    return UserProfile(
        ageGroup="26-35",
        employmentType="salaried",
        incomeStability="stable",
        monthlyInvestment="5000",
        existingEMIs="none",
        emergencyFund="strong",
        investmentHorizon="long",
        riskComfort="medium",
        taxAwareness="yes",
        goldPreference="no",
    )


@pytest.fixture()
def stretched_profile():
    """55+ with every adjustment pulling equity down."""
    return UserProfile(
        ageGroup="55+",
        employmentType="self-employed",
        incomeStability="variable",
        monthlyInvestment="1000",
        existingEMIs="high",
        emergencyFund="none",
        investmentHorizon="short",
        riskComfort="low",
        taxAwareness="no",
        goldPreference="yes",
    )
