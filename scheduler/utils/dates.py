import re
from datetime import date, datetime, timedelta, timezone

from ..config import DATE_FORMAT, DATE_PATTERN

_DATE_RE = re.compile(DATE_PATTERN)


def parse_date(value: str) -> date:
    # Anchored at UTC midnight so the result never depends on the local zone
    return datetime.strptime(value, DATE_FORMAT).replace(tzinfo=timezone.utc).date()


def format_date(value: date) -> str:
    return value.isoformat()


def is_valid_date_string(value) -> bool:
    """
    True when value is a YYYY-MM-DD string naming a real calendar day.
    "2026-02-30" matches the pattern but fails the round trip.
    """
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        return False
    try:
        parsed = parse_date(value)
    except ValueError:
        return False
    return format_date(parsed) == value


def add_days(value: str, days: int) -> str:
    return format_date(parse_date(value) + timedelta(days=days))


def subtract_days(value: str, days: int) -> str:
    return format_date(parse_date(value) - timedelta(days=days))
