# salon/core.py

import re
from datetime import date

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

_HHMM = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def overlaps(a_start, a_end, b_start, b_end) -> bool:
    # half-open intervals: touching ends do not collide
    return a_start < b_end and b_start < a_end


def is_hhmm(value: str) -> bool:
    return isinstance(value, str) and _HHMM.match(value) is not None


def to_minutes(value: str) -> int:
    """Convert a 24-hour "HH:MM" string to minutes since midnight."""
    match = _HHMM.match(value or "")
    if match is None:
        raise ValueError(f"Time must be HH:MM (24-hour), got {value!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


def format_minutes(minutes: int) -> str:
    if not 0 <= minutes < 24 * 60:
        raise ValueError(f"Minutes out of range for a single day: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def weekday_name(on_date: date) -> str:
    return WEEKDAYS[on_date.weekday()]
