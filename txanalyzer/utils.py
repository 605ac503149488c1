# txanalyzer/utils.py
from datetime import date, datetime

from txanalyzer.core.errors import InvalidDateError


def date_components(date_str):
    """
    Split a YYYY-MM-DD string on '-' into (year, month, day) integers.
    Components that are missing or not numeric come back as None.
    """
    parts = str(date_str).split('-')
    components = []
    for idx in range(3):
        try:
            components.append(int(parts[idx]))
        except (IndexError, ValueError):
            components.append(None)
    return tuple(components)


def month_key(date_str):
    """Return the raw two-character month field of a YYYY-MM-DD string."""
    parts = str(date_str).split('-')
    return parts[1] if len(parts) > 1 else None


def parse_calendar_date(value):
    """Parse a YYYY-MM-DD string (or pass through a date) as a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value.strip(), '%Y-%m-%d').date()
    except (AttributeError, TypeError, ValueError):
        raise InvalidDateError(value)
