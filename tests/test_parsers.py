"""Tests for rupee parsing and rounding helpers."""

import pytest

from allocura.planner.parsers import monthly_rate_from_annual, parse_inr, round_half_up


@pytest.mark.parametrize(
    "raw,expected",
    [
        (5000, 5000.0),
        ("5000", 5000.0),
        ("5,000", 5000.0),
        ("1,00,000", 100000.0),
        ("₹2,500", 2500.0),
        ("Rs. 1500", 1500.0),
        ("INR 750", 750.0),
        ("10k", 10000.0),
        ("1.5L", 150000.0),
        ("2 Lakhs", 200000.0),
        ("1 Cr", 10000000.0),
    ],
)
def test_parse_inr(raw, expected):
    assert parse_inr(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "custom", "abc", True, float("nan")])
def test_parse_inr_rejects(raw):
    assert parse_inr(raw) is None


def test_round_half_up_differs_from_bankers_rounding():
    assert round_half_up(12.5) == 13
    assert round_half_up(2.5) == 3
    assert round_half_up(3.125) == 3
    assert round_half_up(40.625) == 41


def test_monthly_rate_from_annual():
    assert monthly_rate_from_annual(12) == pytest.approx(0.01)
