"""Calendar date helpers shared by the cycle engine and the calendar views."""

import re
from datetime import date, datetime, timedelta

WEEK_DAYS = 7
DECEMBER = 12
_SUNDAY = 6
_ISO_DATE = re.compile(r"(\d{4}-\d{2}-\d{2})(?:[T ].*)?")


def parse_iso_date(value: object) -> date | None:
    """Parse a ``yyyy-MM-dd`` value, returning None when it is not a real date.

    A timestamp string is accepted when it starts with such a date; its date
    part is used. Basic (``20240101``) and week-date forms are rejected.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    match = _ISO_DATE.fullmatch(value.strip())
    if match is None:
        return None
    try:
        return date.fromisoformat(match.group(1))
    except ValueError:
        return None


def format_date(day: date) -> str:
    """Format a date as ``yyyy-MM-dd``."""
    return day.isoformat()


def days_between(later: date, earlier: date) -> int:
    """Return the whole-day difference ``later - earlier``."""
    return (later - earlier).days


def start_of_week(day: date) -> date:
    """Return the Sunday on or before ``day``."""
    offset = (day.weekday() - _SUNDAY) % WEEK_DAYS
    return day - timedelta(days=offset)


def end_of_week(day: date) -> date:
    """Return the Saturday on or after ``day``."""
    return start_of_week(day) + timedelta(days=WEEK_DAYS - 1)


def end_of_month(year: int, month: int) -> date:
    """Return the last day of a month."""
    if month == DECEMBER:
        return date(year + 1, 1, 1) - timedelta(days=1)
    return date(year, month + 1, 1) - timedelta(days=1)
