from datetime import datetime
from typing import Optional

from workhours.core.timeparse import DateLike, try_parse_date
from workhours.models.shift import SuggestedTimes

DEFAULT_SUGGESTION = SuggestedTimes(start_time="08:00", end_time="17:00")
SATURDAY_SUGGESTION = SuggestedTimes(start_time="13:00", end_time="20:00")
SUNDAY_SUGGESTION = SuggestedTimes(start_time="10:00", end_time="18:00")
EVENING_SUGGESTION = SuggestedTimes(start_time="18:00", end_time="22:00")
NIGHT_SUGGESTION = SuggestedTimes(start_time="22:00", end_time="06:00")

def suggest_times(shift_date: DateLike, now: Optional[datetime] = None) -> SuggestedTimes:
    """Form default for a new shift on `shift_date`, given the current time"""
    day = try_parse_date(shift_date)
    if day is None:
        return DEFAULT_SUGGESTION.model_copy()

    if day.weekday() == 5:
        suggestion = SATURDAY_SUGGESTION
    elif day.weekday() == 6:
        suggestion = SUNDAY_SUGGESTION
    else:
        hour = (now or datetime.now()).hour
        if 18 <= hour < 22:
            suggestion = EVENING_SUGGESTION
        elif hour >= 22 or hour < 6:
            suggestion = NIGHT_SUGGESTION  # ends next day
        else:
            suggestion = DEFAULT_SUGGESTION
    return suggestion.model_copy()
