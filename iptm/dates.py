"""Parsing of absolute and relative dates typed by the user."""

from __future__ import annotations

import datetime as _dt
import re
from datetime import date, timedelta

__all__ = [
    "IptmError",
    "parse_date_element",
    "normalize_date",
    "parse_date",
    "parse_days",
    "days_from_today",
]


class IptmError(Exception):
    """Raised when a user-facing operation cannot be completed."""


_DATE_RE = re.compile(
    r"""
    (\d{1,2}|\.|\+\d{1,2})[-/]   # day
    (\d{1,2}|\.|\+\d{1,2})[-/]   # month
    (\d{2,4}|\.|\+\d{1,2})       # year
    """,
    re.VERBOSE,
)

_RELATIVE_RE = re.compile(
    r"""
    (\.|\+\d{1,2})[-/]   # day
    (\.|\+\d{1,2})[-/]   # month
    (\.|\+\d{1,2})       # year
    """,
    re.VERBOSE,
)


def parse_date_element(element: str, current: int) -> int:
    """Resolve one date field: '.' keeps *current*, '+N' adds N, digits are literal."""
    if element.startswith("."):
        return current
    if element.startswith("+"):
        return current + int(element[1:])
    return int(element)


def normalize_date(year: int, month: int, day: int) -> date:
    """Build a date, clamping the month to 1..12 and letting the day roll over."""
    month = min(max(month, 1), 12)
    try:
        base = date(year, month, 1)
    except (ValueError, OverflowError):
        raise IptmError("Error: normalization error #1") from None
    try:
        return base + timedelta(days=day - 1)
    except OverflowError:
        raise IptmError("Error: normalization error #2") from None


def _resolve(match: re.Match[str], today: date) -> tuple[int, int, int]:
    day_text, month_text, year_text = match.groups()
    return (
        parse_date_element(year_text, today.year),
        parse_date_element(month_text, today.month),
        parse_date_element(day_text, today.day),
    )


def parse_date(text: str, today: date | None = None) -> date:
    """Parse 'day/month/year', where each field may be digits, '.' or '+N'."""
    today = today or date.today()
    match = _DATE_RE.search(text)
    if match is None:
        raise IptmError("Error, invalid date format")
    year, month, day = _resolve(match, today)
    if year < 1000:
        year += 2000
    return normalize_date(year, month, day)


def parse_days(text: str, today: date | None = None) -> int:
    """Parse a purely relative date ('.' or '+N' fields) into a day offset from today."""
    today = today or date.today()
    match = _RELATIVE_RE.search(text)
    if match is None:
        raise IptmError("Error, invalid date format")
    year, month, day = _resolve(match, today)
    return days_from_today(normalize_date(year, month, day), today)


def days_from_today(date: _dt.date, today: _dt.date | None = None) -> int:
    """Number of days from *today* until *date* (negative if in the past)."""
    today = today or _dt.date.today()
    return (date - today).days