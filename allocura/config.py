# allocura/config.py
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(dotenv_path=os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"), override=False)

ROUNDING_INDEPENDENT = "independent"
ROUNDING_LARGEST_REMAINDER = "largest_remainder"
ROUNDING_MODES = (ROUNDING_INDEPENDENT, ROUNDING_LARGEST_REMAINDER)

DEFAULT_ROUNDING = ROUNDING_INDEPENDENT
DEFAULT_TIMEZONE = "Asia/Kolkata"
DEFAULT_MIN_MONTHLY_INR = 500.0
DEFAULT_SIP_RETURN_PCT = 12.0
DEFAULT_SIP_YEARS = 10
DEFAULT_TRAJECTORY_START = 2024


@dataclass(frozen=True)
class Settings:
    rounding: str
    timezone: str
    min_monthly_inr: float
    sip_return_pct: float
    sip_years: int
    trajectory_start: int


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_settings() -> Settings:
    """Read settings from the environment on every call (no caching)."""
    rounding = _env_str("ALLOCURA_ROUNDING", DEFAULT_ROUNDING).lower()
    if rounding not in ROUNDING_MODES:
        rounding = DEFAULT_ROUNDING
    return Settings(
        rounding=rounding,
        timezone=_env_str("ALLOCURA_TIMEZONE", DEFAULT_TIMEZONE),
        min_monthly_inr=_env_float("ALLOCURA_MIN_MONTHLY_INR", DEFAULT_MIN_MONTHLY_INR),
        sip_return_pct=_env_float("ALLOCURA_SIP_RETURN_PCT", DEFAULT_SIP_RETURN_PCT),
        sip_years=_env_int("ALLOCURA_SIP_YEARS", DEFAULT_SIP_YEARS),
        trajectory_start=_env_int("ALLOCURA_TRAJECTORY_START", DEFAULT_TRAJECTORY_START),
    )
