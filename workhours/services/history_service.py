import logging
from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from workhours.core.timeparse import try_parse_date
from workhours.models.shift import PayBucket, ShiftRecord, Project
from workhours.models.report import (
    FilterValue, WeekGroup, HistoryTotals, HistoryReport, FilterOptions,
    WeeklyHours, ProjectHours, HoursStats,
)

logger = logging.getLogger(__name__)

ALL = "all"
UNKNOWN_PROJECT = "Unknown Project"

def normalize_filter(value: FilterValue) -> Optional[int]:
    """None for "all", otherwise the numeric filter value. Raises ValueError."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if value in ("", ALL):
            return None
    return int(value)

def week_start(day: date) -> date:
    """Monday of the ISO week containing `day`"""
    return day - timedelta(days=day.weekday())

def _dated(records: Iterable[ShiftRecord]) -> List[Tuple[date, ShiftRecord]]:
    dated = []
    for record in records:
        day = try_parse_date(record.date)
        if day is None:
            logger.debug(f"Skipping record {record.record_id} with invalid date {record.date!r}")
            continue
        dated.append((day, record))
    return dated

def _matches(day: date, year: Optional[int], month: Optional[int], week: Optional[int]) -> bool:
    # month is zero-based
    return ((year is None or day.year == year)
            and (month is None or day.month - 1 == month)
            and (week is None or day.isocalendar()[1] == week))

def sum_classifications(records: Iterable[ShiftRecord]) -> Dict[str, float]:
    """Bucket-wise sum of stored classifications"""
    totals = {bucket: 0.0 for bucket in PayBucket}
    for record in records:
        for key, hours in (record.hour_classification or {}).items():
            bucket = PayBucket.parse(key)
            if bucket is not None:
                totals[bucket] += hours or 0.0
    return {bucket.value: round(hours, 2) for bucket, hours in totals.items()}

def group_by_week(records: Sequence[Tuple[date, ShiftRecord]]) -> List[WeekGroup]:
    """Group dated records by week start, newest week first"""
    groups: Dict[date, List[ShiftRecord]] = defaultdict(list)
    for day, record in records:
        groups[week_start(day)].append(record)

    return [
        WeekGroup(
            week_start=start,
            records=groups[start],
            total_hours=round(sum(r.hours_worked or 0.0 for r in groups[start]), 2),
        )
        for start in sorted(groups, reverse=True)
    ]

def filter_and_group(
    records: Iterable[ShiftRecord],
    year: FilterValue = ALL,
    month: FilterValue = ALL,
    week: FilterValue = ALL,
) -> HistoryReport:
    """
    Filter records by year / zero-based month / ISO week and group them by week.

    Each filter is independent and accepts "all". Records whose date can't be
    parsed are left out of the result entirely. Input records are not modified;
    the report holds copies.
    """
    year_value = normalize_filter(year)
    month_value = normalize_filter(month)
    week_value = normalize_filter(week)

    matching = [
        (day, record.model_copy(deep=True))
        for day, record in _dated(records)
        if _matches(day, year_value, month_value, week_value)
    ]
    matching.sort(key=lambda item: item[0], reverse=True)

    filtered = [record for _, record in matching]
    totals = HistoryTotals(
        total_hours=round(sum(r.hours_worked or 0.0 for r in filtered), 2),
        by_bucket=sum_classifications(filtered),
    )

    return HistoryReport(
        year=ALL if year_value is None else year_value,
        month=ALL if month_value is None else month_value,
        week=ALL if week_value is None else week_value,
        records=filtered,
        week_groups=group_by_week(matching),
        totals=totals,
    )

def available_filters(
    records: Iterable[ShiftRecord],
    year: FilterValue = ALL,
    month: FilterValue = ALL,
) -> FilterOptions:
    """Filter choices, each level narrowed by the coarser selections above it"""
    year_value = normalize_filter(year)
    month_value = normalize_filter(month)
    days = [day for day, _ in _dated(records)]

    in_year = [d for d in days if _matches(d, year_value, None, None)]
    in_month = [d for d in in_year if _matches(d, None, month_value, None)]

    return FilterOptions(
        years=sorted({d.year for d in days}, reverse=True),
        months=sorted({d.month - 1 for d in in_year}),
        weeks=sorted({d.isocalendar()[1] for d in in_month}),
    )

def hours_by_week(records: Iterable[ShiftRecord]) -> List[WeeklyHours]:
    """Net hours per ISO week, oldest first"""
    weekly: Dict[Tuple[int, int], float] = defaultdict(float)
    for day, record in _dated(records):
        iso = day.isocalendar()
        weekly[(iso[0], iso[1])] += record.hours_worked or 0.0

    return [
        WeeklyHours(
            week_key=f"{iso_year}-W{iso_week:02d}",
            week_start=date.fromisocalendar(iso_year, iso_week, 1),
            hours=round(hours, 2),
        )
        for (iso_year, iso_week), hours in sorted(weekly.items())
    ]

def hours_by_project(records: Iterable[ShiftRecord], projects: Iterable[Project] = ()) -> List[ProjectHours]:
    """Net hours per project, largest first"""
    names = {p.project_id: p.name for p in projects}
    totals: Dict[Optional[str], float] = defaultdict(float)
    for record in records:
        project_id = record.project_id if record.project_id in names else None
        totals[project_id] += record.hours_worked or 0.0

    summary = [
        ProjectHours(
            project_id=project_id,
            project_name=names.get(project_id, UNKNOWN_PROJECT),
            hours=round(hours, 2),
        )
        for project_id, hours in totals.items()
    ]
    summary.sort(key=lambda p: (-p.hours, p.project_name))
    return summary

def calculate_stats(records: Iterable[ShiftRecord], projects: Iterable[Project] = ()) -> HoursStats:
    records = list(records)
    return HoursStats(
        by_week=hours_by_week(records),
        by_project=hours_by_project(records, projects),
    )
