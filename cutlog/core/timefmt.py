# cutlog/core/timefmt.py
# Timestamp parsing & duration formatting for the persisted DD/MM/YYYY HH:MM format

# Timestamps are shop wall-clock readings w/ no zone attached. They are mapped
# to epoch milliseconds as if the wall clock were UTC, so differences between two
# readings are plain calendar arithmetic (no DST jumps).

from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any
from zoneinfo import ZoneInfo

from .constants import TIMESTAMP_FORMAT

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

_TIMESTAMP_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4}) (\d{2}):(\d{2})$", re.ASCII)
_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)
_HHMMSS_RE = re.compile(r"^(\d{2,}):([0-5]\d):([0-5]\d)$", re.ASCII)


def _to_millis(dt: datetime) -> int:
    return (dt - _EPOCH) // _ONE_MS


# * Strict parser: exactly DD/MM/YYYY HH:MM, calendar-valid, else None
def parse_timestamp(text: Any) -> int | None:
    if not isinstance(text, str):
        return None
    match = _TIMESTAMP_RE.match(text.strip())
    if match is None:
        return None
    day, month, year, hour, minute = (int(g) for g in match.groups())
    try:
        dt = datetime(year, month, day, hour, minute, tzinfo=timezone.utc)
    except ValueError:
        return None
    return _to_millis(dt)


# * Legacy fallback: bare HH:MM read as that time on `today`
def parse_legacy_clock(text: Any, today: date | None = None) -> int | None:
    if not isinstance(text, str):
        return None
    match = _CLOCK_RE.match(text.strip())
    if match is None:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    day = today or date.today()
    dt = datetime(day.year, day.month, day.day, hour, minute, tzinfo=timezone.utc)
    return _to_millis(dt)


# * Inverse of parse_timestamp
def format_timestamp(millis: int) -> str:
    return (_EPOCH + timedelta(milliseconds=millis)).strftime(TIMESTAMP_FORMAT)


# * Whole seconds between two instants, clamped at zero for clock skew
def elapsed_seconds(start_millis: int, end_millis: int) -> int:
    return max(0, (end_millis - start_millis) // 1000)


# * Format seconds as HH:MM:SS; hours keep growing past 24
def format_hhmmss(seconds: int | float) -> str:
    total = max(0, int(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


# * Parse HH:MM:SS back into seconds
def parse_hhmmss(text: str) -> int | None:
    match = _HHMMSS_RE.match(text.strip()) if isinstance(text, str) else None
    if match is None:
        return None
    hours, minutes, secs = (int(g) for g in match.groups())
    return hours * 3600 + minutes * 60 + secs


def _total_minutes(decimal_hours: Any) -> int:
    try:
        value = float(decimal_hours)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(value) or value <= 0:
        return 0
    # round half up, matching the UI's minute rounding
    return math.floor(value * 60 + 0.5)


# * Decimal hours -> "HH:MM" rounded to the nearest minute
def format_decimal_hours(decimal_hours: Any) -> str:
    hours, minutes = divmod(_total_minutes(decimal_hours), 60)
    return f"{hours:02d}:{minutes:02d}"


# * Decimal hours -> "HH:MMhrs" (admin table style, 18.786 -> "18:47hrs")
def format_decimal_hours_hrs(decimal_hours: Any) -> str:
    return f"{format_decimal_hours(decimal_hours)}hrs"


# * Current shop wall-clock time as DD/MM/YYYY HH:MM
def now_timestamp_text(tz_name: str, now: datetime | None = None) -> str:
    current = now.astimezone(ZoneInfo(tz_name)) if now else datetime.now(ZoneInfo(tz_name))
    return current.strftime(TIMESTAMP_FORMAT)


# * Current shop wall-clock time in the same millis frame as parse_timestamp
def wall_clock_millis(tz_name: str, now: datetime | None = None) -> int:
    current = now.astimezone(ZoneInfo(tz_name)) if now else datetime.now(ZoneInfo(tz_name))
    return _to_millis(current.replace(tzinfo=timezone.utc))
