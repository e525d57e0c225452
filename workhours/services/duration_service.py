from datetime import datetime, date, timedelta

from workhours.core.timeparse import TimeLike, parse_time

# Any fixed day works; only the time-of-day difference matters
_REFERENCE_DAY = date(2000, 1, 1)

def gross_hours(start_time: TimeLike, end_time: TimeLike) -> float:
    """Elapsed hours from start to end, rolling end past midnight if earlier"""
    start = datetime.combine(_REFERENCE_DAY, parse_time(start_time))
    end = datetime.combine(_REFERENCE_DAY, parse_time(end_time))
    if end < start:
        end += timedelta(days=1)  # overnight
    return (end - start).total_seconds() / 3600

def net_hours(start_time: TimeLike, end_time: TimeLike, break_minutes: int = 0) -> float:
    """Worked hours after the break (2 decimals, never negative). Supports overnight shifts."""
    total = gross_hours(start_time, end_time) - break_minutes / 60
    return round(max(0.0, total), 2)
