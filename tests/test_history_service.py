from datetime import date

import pytest

from workhours.models.shift import PayBucket, Project
from workhours.services.history_service import (
    available_filters,
    calculate_stats,
    filter_and_group,
    hours_by_project,
    hours_by_week,
    sum_classifications,
    week_start,
)


def dates_of(records):
    return [r.date for r in records]


def test_week_start_is_monday():
    assert week_start(date(2024, 1, 7)) == date(2024, 1, 1)
    assert week_start(date(2024, 1, 1)) == date(2024, 1, 1)
    assert week_start(date(2024, 1, 8)) == date(2024, 1, 8)


def test_groups_by_iso_week_newest_first(make_record):
    records = [
        make_record("2024-01-01"),
        make_record("2024-01-08"),
        make_record("2024-01-07"),
    ]

    report = filter_and_group(records)

    assert dates_of(report.records) == ["2024-01-08", "2024-01-07", "2024-01-01"]
    assert [g.week_start for g in report.week_groups] == [date(2024, 1, 8), date(2024, 1, 1)]
    assert dates_of(report.week_groups[1].records) == ["2024-01-07", "2024-01-01"]
    assert report.week_groups[1].total_hours == 16.0


def test_year_and_month_filter(make_record):
    records = [make_record("2024-01-15"), make_record("2024-02-01"), make_record("2023-01-20")]

    report = filter_and_group(records, year=2024, month=0)

    assert dates_of(report.records) == ["2024-01-15"]


def test_filters_accept_strings_and_all(make_record):
    records = [make_record("2024-01-15"), make_record("2024-02-01")]

    assert dates_of(filter_and_group(records, "2024", "1", "all").records) == ["2024-02-01"]
    assert len(filter_and_group(records, "all", "all", "all").records) == 2
    assert len(filter_and_group(records, None, None, None).records) == 2


def test_month_filter_without_year(make_record):
    records = [make_record("2024-01-15"), make_record("2023-01-03"), make_record("2023-03-03")]

    report = filter_and_group(records, month=0)

    assert dates_of(report.records) == ["2024-01-15", "2023-01-03"]


def test_week_filter_uses_iso_week(make_record):
    records = [
        make_record("2023-12-31"),  # Sunday, ISO week 52 of 2023
        make_record("2024-01-01"),
        make_record("2024-01-07"),
        make_record("2024-01-08"),
    ]

    report = filter_and_group(records, year=2024, week=1)

    assert dates_of(report.records) == ["2024-01-07", "2024-01-01"]


def test_unparseable_dates_are_dropped(make_record):
    records = [make_record("2024-01-02"), make_record("garbage"), make_record("")]

    report = filter_and_group(records)

    assert dates_of(report.records) == ["2024-01-02"]
    assert report.totals.total_hours == 8.0


def test_totals_overall_and_per_bucket(make_record):
    records = [
        make_record("2024-01-02", "08:00", "19:00", break_minutes=30),
        make_record("2024-01-07", "10:00", "18:00"),
    ]

    totals = filter_and_group(records).totals

    assert totals.total_hours == 18.5
    assert totals.by_bucket == {
        "Base": 10.0,
        "Evening": 1.0,
        "Night": 0.0,
        "SaturdayAfternoon": 0.0,
        "SundayOrHoliday": 8.0,
    }


def test_label_keys_fold_into_buckets(make_record):
    record = make_record("2024-01-02")
    record.hour_classification = {"Sueldo base": 2.0, "OB 2": 1.25, "Base": 1.0, "Bonus": 9.0}

    totals = sum_classifications([record])

    assert totals[PayBucket.BASE.value] == 3.0
    assert totals[PayBucket.NIGHT.value] == 1.25
    assert "Bonus" not in totals


def test_empty_input():
    report = filter_and_group([])

    assert report.records == []
    assert report.week_groups == []
    assert report.totals.total_hours == 0.0
    assert report.totals.by_bucket == PayBucket.empty_mapping()


def test_input_records_are_not_aliased(make_record):
    original = make_record("2024-01-02", notes="before")
    records = [original]

    report = filter_and_group(records)
    report.records[0].notes = "after"
    report.records[0].hour_classification["Base"] = 99.0

    assert original.notes == "before"
    assert original.hour_classification["Base"] == 8.0
    assert records == [original]


def test_invalid_filter_value_raises(make_record):
    with pytest.raises(ValueError):
        filter_and_group([make_record("2024-01-02")], year="last-year")


def test_available_filters_cascade(make_record):
    records = [
        make_record("2023-12-31"),
        make_record("2024-01-15"),
        make_record("2024-01-16"),
        make_record("2024-02-01"),
        make_record("bad"),
    ]

    assert available_filters(records) == available_filters(records, "all", "all")

    everything = available_filters(records)
    assert everything.years == [2024, 2023]
    assert everything.months == [0, 1, 11]
    assert everything.weeks == [3, 5, 52]

    in_2024 = available_filters(records, year=2024)
    assert in_2024.months == [0, 1]
    assert in_2024.weeks == [3, 5]

    in_january = available_filters(records, year="2024", month="0")
    assert in_january.years == [2024, 2023]
    assert in_january.months == [0, 1]
    assert in_january.weeks == [3]


def test_hours_by_week(make_record):
    records = [
        make_record("2024-01-01", "08:00", "12:00"),
        make_record("2023-12-31", "08:00", "10:00"),
        make_record("2024-01-03", "08:00", "09:30"),
        make_record("nope"),
    ]

    weekly = hours_by_week(records)

    assert [(w.week_key, w.week_start, w.hours) for w in weekly] == [
        ("2023-W52", date(2023, 12, 25), 2.0),
        ("2024-W01", date(2024, 1, 1), 5.5),
    ]


def test_hours_by_project(make_record):
    projects = [Project(project_id="p1", name="Warehouse"), Project(project_id="p2", name="Retail")]
    records = [
        make_record("2024-01-01", "08:00", "12:00", project_id="p1"),
        make_record("2024-01-02", "08:00", "10:00", project_id="p2"),
        make_record("2024-01-03", "08:00", "16:00", project_id="p1"),
        make_record("2024-01-04", "08:00", "09:00", project_id="gone"),
    ]

    summary = hours_by_project(records, projects)

    assert [(p.project_name, p.hours) for p in summary] == [
        ("Warehouse", 12.0),
        ("Retail", 2.0),
        ("Unknown Project", 1.0),
    ]
    assert summary[-1].project_id is None


def test_calculate_stats_accepts_iterators(make_record):
    records = (make_record(d) for d in ["2024-01-01", "2024-01-09"])

    stats = calculate_stats(records)

    assert [w.week_key for w in stats.by_week] == ["2024-W01", "2024-W02"]
    assert [(p.project_name, p.hours) for p in stats.by_project] == [("Unknown Project", 16.0)]
