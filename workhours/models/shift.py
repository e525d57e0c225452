from enum import Enum
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, Dict

class PayBucket(str, Enum):
    """Mutually exclusive pay-rate categories for worked time"""
    BASE = "Base"
    EVENING = "Evening"
    NIGHT = "Night"
    SATURDAY_AFTERNOON = "SaturdayAfternoon"
    SUNDAY_OR_HOLIDAY = "SundayOrHoliday"

    @property
    def label(self) -> str:
        return BUCKET_LABELS[self]

    @classmethod
    def parse(cls, key: str) -> Optional["PayBucket"]:
        """Resolve a stored classification key (value or display label)"""
        for bucket in cls:
            if key == bucket.value or key == BUCKET_LABELS[bucket]:
                return bucket
        return None

    @classmethod
    def empty_mapping(cls) -> Dict[str, float]:
        return {bucket.value: 0.0 for bucket in cls}

BUCKET_LABELS = {
    PayBucket.BASE: "Sueldo base",
    PayBucket.EVENING: "OB 1",
    PayBucket.NIGHT: "OB 2",
    PayBucket.SATURDAY_AFTERNOON: "OB 3",
    PayBucket.SUNDAY_OR_HOLIDAY: "OB 4",
}

class ShiftEntry(BaseModel):
    """Raw shift values as collected by the entry form"""
    date: str  # YYYY-MM-DD
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    break_minutes: int = 0
    project_id: str
    hourly_rate: Optional[float] = Field(default=None, ge=0)
    notes: str = ""
    colleagues: str = ""
    task_description: str = ""

class ShiftRecord(ShiftEntry):
    """A shift with its derived fields, as handed to the store"""
    record_id: Optional[int] = None
    account_id: str
    hours_worked: float
    hour_classification: Dict[str, float]
    created_at: datetime

class ShiftPreview(BaseModel):
    hours_worked: float
    hour_classification: Dict[str, float]

class SuggestedTimes(BaseModel):
    start_time: str
    end_time: str

class Project(BaseModel):
    project_id: str
    name: str
    code: str = ""
