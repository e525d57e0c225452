from datetime import date, datetime

import pytest

from workhours.services.suggestion_service import DEFAULT_SUGGESTION, suggest_times


def at(hour):
    return datetime(2024, 1, 3, hour, 15)


@pytest.mark.parametrize("hour", [0, 9, 13, 18, 23])
def test_saturday_ignores_clock(hour):
    suggestion = suggest_times("2024-01-06", now=at(hour))
    assert (suggestion.start_time, suggestion.end_time) == ("13:00", "20:00")


@pytest.mark.parametrize("hour", [0, 9, 13, 18, 23])
def test_sunday_ignores_clock(hour):
    suggestion = suggest_times(date(2024, 1, 7), now=at(hour))
    assert (suggestion.start_time, suggestion.end_time) == ("10:00", "18:00")


@pytest.mark.parametrize(
    "hour,expected",
    [
        (6, ("08:00", "17:00")),
        (12, ("08:00", "17:00")),
        (17, ("08:00", "17:00")),
        (18, ("18:00", "22:00")),
        (21, ("18:00", "22:00")),
        (22, ("22:00", "06:00")),
        (0, ("22:00", "06:00")),
        (5, ("22:00", "06:00")),
    ],
)
def test_weekday_follows_current_hour(hour, expected):
    suggestion = suggest_times("2024-01-03", now=at(hour))
    assert (suggestion.start_time, suggestion.end_time) == expected


def test_invalid_date_falls_back_to_default():
    suggestion = suggest_times("31/12/2024", now=at(23))
    assert (suggestion.start_time, suggestion.end_time) == ("08:00", "17:00")


def test_returned_suggestion_is_a_copy():
    suggestion = suggest_times("2024-01-03", now=at(10))
    suggestion.start_time = "07:00"
    assert DEFAULT_SUGGESTION.start_time == "08:00"
