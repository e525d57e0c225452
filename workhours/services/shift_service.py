from datetime import datetime
from typing import Optional

from workhours.models.shift import ShiftEntry, ShiftRecord, ShiftPreview
from workhours.services.duration_service import net_hours
from workhours.services.classification_service import classify_hours

def preview_shift(entry: ShiftEntry) -> ShiftPreview:
    """Derived fields for an entry that hasn't been saved yet"""
    return ShiftPreview(
        hours_worked=net_hours(entry.start_time, entry.end_time, entry.break_minutes),
        hour_classification=classify_hours(entry.date, entry.start_time, entry.end_time),
    )

def build_record(
    entry: ShiftEntry,
    account_id: str,
    record_id: Optional[int] = None,
    created_at: Optional[datetime] = None,
) -> ShiftRecord:
    """
    Build the full record to store for `entry`.

    Both derived fields are always recomputed from the complete entry, so an
    edit is a full replace: pass the existing record_id and created_at.
    """
    derived = preview_shift(entry)
    return ShiftRecord(
        **entry.model_dump(),
        record_id=record_id,
        account_id=account_id,
        hours_worked=derived.hours_worked,
        hour_classification=derived.hour_classification,
        created_at=created_at or datetime.now().replace(microsecond=0),
    )
