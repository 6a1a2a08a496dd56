from __future__ import annotations

import re
from datetime import date
from typing import Any

MONTH_NAMES = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

_ISO_DATE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[t\s].*)?$")
_SLASH_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2,4})$")
_MONTH_DAY = re.compile(r"^([a-z]+)\.?\s+(\d{1,2})(?:st|nd|rd|th)?(?:,?\s+(\d{4}))?$")


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    return None


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date_value(value: Any, reference_date: date | None = None) -> date | None:
    """
    Normalize a date parameter into a calendar date.

    Accepts a pre-parsed ``{"year", "month", "day"}`` object (month is 1-based)
    or a string: ``2025-11-08``, ``2025-11-08T10:00:00Z``, ``11/08/2025`` or
    ``November 8[, 2025]``. Returns None when nothing usable is found.
    """
    if isinstance(value, dict):
        year, month, day = (_as_int(value.get(k)) for k in ("year", "month", "day"))
        if year is None or month is None or day is None:
            return None
        return _safe_date(year, month, day)

    if not isinstance(value, str) or not value.strip():
        return None

    normalized = value.lower().strip()

    match = _ISO_DATE.match(normalized)
    if match:
        return _safe_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    match = _SLASH_DATE.match(normalized)
    if match:
        year = int(match.group(3))
        if year < 100:
            year += 2000
        return _safe_date(year, int(match.group(1)), int(match.group(2)))

    match = _MONTH_DAY.match(normalized)
    if match and match.group(1) in MONTH_NAMES:
        month = MONTH_NAMES[match.group(1)]
        day = int(match.group(2))
        if match.group(3):
            return _safe_date(int(match.group(3)), month, day)
        if reference_date is None:
            reference_date = date.today()
        year = reference_date.year
        if month < reference_date.month or (month == reference_date.month and day < reference_date.day):
            year += 1
        return _safe_date(year, month, day)

    return None


def format_display_time(hour: int, minute: int) -> str:
    """Render a 24-hour clock value as ``H:MM AM/PM``."""
    suffix = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {suffix}"


def parse_time_preference(text: str) -> tuple[int, int] | None:
    """Parse time preference from text. Returns (hour, minute) or None."""
    normalized = text.lower().strip()

    time_patterns = [
        r"\b(\d{1,2}):(\d{2})(?::\d{2})?\s*(am|pm)?\b",
        r"\b(\d{1,2})\s*(am|pm)\b",
    ]

    for pattern in time_patterns:
        match = re.search(pattern, normalized)
        if match:
            hour = int(match.group(1))
            minute = int(match.group(2)) if match.group(2).isdigit() else 0
            am_pm = match.group(match.lastindex) if match.group(match.lastindex) in ("am", "pm") else None

            if am_pm and not 1 <= hour <= 12:
                continue
            if am_pm == "pm" and hour != 12:
                hour += 12
            elif am_pm == "am" and hour == 12:
                hour = 0

            if 0 <= hour <= 23 and 0 <= minute <= 59:
                return (hour, minute)

    return None


def parse_time_value(value: Any) -> str | None:
    """
    Normalize a time parameter into a 12-hour display string.

    Structured ``{"hours", "minutes"}`` values are always rendered; strings are
    rendered when they parse as a clock time and otherwise kept verbatim.
    """
    if isinstance(value, dict):
        hours = _as_int(value.get("hours"))
        raw_minutes = value.get("minutes")
        minutes = 0 if raw_minutes is None else _as_int(raw_minutes)
        if hours is None or minutes is None:
            return None
        if not (0 <= hours <= 23 and 0 <= minutes <= 59):
            return None
        return format_display_time(hours, minutes)

    if not isinstance(value, str) or not value.strip():
        return None

    parsed = parse_time_preference(value)
    if parsed:
        return format_display_time(*parsed)
    return value.strip()
