# allocura/clock.py
from __future__ import annotations

import datetime
from typing import Optional

import pytz

from allocura.config import get_settings


def report_timezone(name: Optional[str] = None):
    tz_name = name or get_settings().timezone
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        return pytz.timezone("Asia/Kolkata")


def now_local(name: Optional[str] = None) -> datetime.datetime:
    return datetime.datetime.now(report_timezone(name))


def generated_stamp(when: Optional[datetime.datetime] = None, name: Optional[str] = None) -> str:
    tz = report_timezone(name)
    if when is None:
        when = datetime.datetime.now(tz)
    elif when.tzinfo is None:
        when = tz.localize(when)
    else:
        when = when.astimezone(tz)
    return f"Generated on {when.strftime('%d %b %Y')} at {when.strftime('%I:%M %p')} ({when.tzname()})"
