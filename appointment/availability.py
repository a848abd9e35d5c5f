from datetime import date as date_type
import re

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_TIME_RE = re.compile(r"([01]?\d|2[0-3]):([0-5]\d)")


def weekday_label(date_str: str) -> str:
    """'2024-01-01' -> 'Mon'. Raises ValueError for anything but YYYY-MM-DD."""
    if not _DATE_RE.fullmatch(date_str):
        raise ValueError(f"Invalid date: {date_str!r}")
    return WEEKDAYS[date_type.fromisoformat(date_str).weekday()]


def to_minutes(time_str: str) -> int:
    match = _TIME_RE.fullmatch(time_str.strip())
    if not match:
        raise ValueError(f"Invalid time: {time_str!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


def normalize_time(time_str: str) -> str:
    """'9:05' -> '09:05'."""
    hours, minutes = divmod(to_minutes(time_str), 60)
    return f"{hours:02d}:{minutes:02d}"


def within_window(time_str: str, window) -> bool:
    # Both ends inclusive
    return to_minutes(window.start_time) <= to_minutes(time_str) <= to_minutes(window.end_time)
