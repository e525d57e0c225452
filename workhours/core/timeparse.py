from datetime import date, datetime, time
from typing import Optional, Union

DATE_FORMAT = '%Y-%m-%d'
TIME_FORMAT = '%H:%M'

DateLike = Union[date, str]
TimeLike = Union[time, str]

def parse_date(value: DateLike) -> date:
    """Parse a YYYY-MM-DD string (or pass a date through). Raises ValueError."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value.strip(), DATE_FORMAT).date()

def parse_time(value: TimeLike) -> time:
    """Parse an HH:MM string (or pass a time through). Raises ValueError."""
    if isinstance(value, time):
        return value
    return datetime.strptime(value.strip(), TIME_FORMAT).time()

def try_parse_date(value) -> Optional[date]:
    """Like parse_date, but None for anything unparseable"""
    try:
        return parse_date(value)
    except (TypeError, ValueError, AttributeError):
        return None
