from pydantic import BaseModel
from datetime import date
from typing import Dict, List, Optional, Union

from workhours.models.shift import ShiftRecord

FilterValue = Union[int, str, None]  # "all" or None means no filter

class WeekGroup(BaseModel):
    """Records sharing an ISO week, keyed by its Monday"""
    week_start: date
    records: List[ShiftRecord]
    total_hours: float

class HistoryTotals(BaseModel):
    total_hours: float
    by_bucket: Dict[str, float]

class HistoryReport(BaseModel):
    """Filtered and grouped view over an account's shift records"""
    year: FilterValue = "all"
    month: FilterValue = "all"
    week: FilterValue = "all"
    records: List[ShiftRecord]
    week_groups: List[WeekGroup]
    totals: HistoryTotals

class FilterOptions(BaseModel):
    years: List[int]
    months: List[int]  # zero-based
    weeks: List[int]

class WeeklyHours(BaseModel):
    week_key: str  # YYYY-Www
    week_start: date
    hours: float

class ProjectHours(BaseModel):
    project_id: Optional[str] = None
    project_name: str
    hours: float

class HoursStats(BaseModel):
    by_week: List[WeeklyHours]
    by_project: List[ProjectHours]
