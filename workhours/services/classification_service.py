import logging
from datetime import datetime, timedelta
from typing import Dict

from workhours.core.timeparse import DateLike, TimeLike, parse_date, parse_time
from workhours.models.shift import PayBucket

logger = logging.getLogger(__name__)

SATURDAY = 5
SUNDAY = 6
SATURDAY_AFTERNOON_START = 13

# Hour-of-day bands for time not claimed by a weekend rule, [start, end)
HOUR_BANDS = [
    (0, 6, PayBucket.NIGHT),
    (6, 18, PayBucket.BASE),
    (18, 22, PayBucket.EVENING),
    (22, 24, PayBucket.NIGHT),
]

# One entry per hour of the day; the bands cover 0-24 exactly once
BUCKET_BY_HOUR = [
    bucket
    for start_hour, end_hour, bucket in HOUR_BANDS
    for _ in range(start_hour, end_hour)
]

STEP = timedelta(minutes=1)

def bucket_for(moment: datetime) -> PayBucket:
    """Pay bucket owning the minute that starts at `moment`"""
    weekday = moment.weekday()
    if weekday == SUNDAY:
        return PayBucket.SUNDAY_OR_HOLIDAY
    if weekday == SATURDAY and moment.hour >= SATURDAY_AFTERNOON_START:
        return PayBucket.SATURDAY_AFTERNOON
    return BUCKET_BY_HOUR[moment.hour]

def classify_hours(shift_date: DateLike, start_time: TimeLike, end_time: TimeLike) -> Dict[str, float]:
    """
    Split the gross shift interval into pay buckets.

    The interval runs from start to end on `shift_date`; an end earlier than
    the start belongs to the next day. Break time is not deducted here.

    Args:
        shift_date: Calendar day of the shift start (date or YYYY-MM-DD)
        start_time: Start wall-clock time (time or HH:MM)
        end_time: End wall-clock time (time or HH:MM)

    Returns:
        Hours per bucket keyed by PayBucket value, every bucket present,
        rounded to 2 decimals. All zeros when the input can't be parsed.
    """
    try:
        day = parse_date(shift_date)
        start = datetime.combine(day, parse_time(start_time))
        end = datetime.combine(day, parse_time(end_time))
    except (TypeError, ValueError, AttributeError):
        logger.debug(f"Unclassifiable shift {shift_date!r} {start_time!r}-{end_time!r}")
        return PayBucket.empty_mapping()

    if end < start:
        end += timedelta(days=1)

    totals = {bucket: timedelta(0) for bucket in PayBucket}
    current = start
    while current < end:
        next_step = min(current + STEP, end)
        totals[bucket_for(current)] += next_step - current
        current = next_step

    # Round once at the end so per-step error can't compound
    return {
        bucket.value: round(duration.total_seconds() / 3600, 2)
        for bucket, duration in totals.items()
    }
