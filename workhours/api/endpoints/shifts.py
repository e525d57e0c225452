import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Response
from workhours.core.config import ShiftFormConfig
from workhours.core.timeparse import parse_date, parse_time
from workhours.models.shift import ShiftEntry, ShiftRecord, ShiftPreview, SuggestedTimes, Project
from workhours.services.shift_service import build_record, preview_shift
from workhours.services.suggestion_service import suggest_times
from workhours.services import record_store

router = APIRouter()
logger = logging.getLogger(__name__)

def validate_entry(entry: ShiftEntry):
    """Reject raw form values the calculators aren't meant to see. Raises ValueError."""
    if not entry.project_id.strip():
        raise ValueError("project_id is required")
    parse_date(entry.date)
    parse_time(entry.start_time)
    parse_time(entry.end_time)
    if entry.break_minutes not in ShiftFormConfig.BREAK_MINUTE_OPTIONS:
        raise ValueError(
            f"break_minutes must be one of {ShiftFormConfig.BREAK_MINUTE_OPTIONS}"
        )

@router.post("/shifts/preview", response_model=ShiftPreview)
async def preview(entry: ShiftEntry):
    """Net hours and pay classification for an unsaved entry"""
    try:
        validate_entry(entry)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return preview_shift(entry)

@router.get("/shifts/suggest", response_model=SuggestedTimes)
async def suggest(date: str, now: Optional[datetime] = None):
    """Suggested start/end times for a new shift on `date` (YYYY-MM-DD), by the caller's clock"""
    return suggest_times(date, now)

@router.get("/accounts/{account_id}/projects", response_model=List[Project])
async def list_projects(account_id: str):
    return record_store.list_projects(account_id)

@router.get("/accounts/{account_id}/shifts", response_model=List[ShiftRecord])
async def list_shifts(account_id: str):
    """All stored shifts for an account, newest first"""
    return record_store.list_records(account_id)

@router.post("/accounts/{account_id}/shifts", response_model=ShiftRecord, status_code=201)
async def create_shift(account_id: str, entry: ShiftEntry):
    """Compute derived fields and store a new shift"""
    try:
        validate_entry(entry)
        record = record_store.insert_record(build_record(entry, account_id))
        logger.info(f"Stored shift {record.record_id} for {account_id}: {record.hours_worked}h on {record.date}")
        return record
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error storing shift for {account_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to store shift")

@router.put("/accounts/{account_id}/shifts/{record_id}", response_model=ShiftRecord)
async def update_shift(account_id: str, record_id: int, entry: ShiftEntry):
    """Replace a stored shift, recomputing hours and classification"""
    try:
        validate_entry(entry)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    existing = record_store.get_record(account_id, record_id)
    if existing is None:
        raise HTTPException(status_code=404, detail=f"Shift {record_id} not found")

    record = build_record(entry, account_id, record_id=record_id, created_at=existing.created_at)
    try:
        replaced = record_store.replace_record(record)
    except Exception as e:
        logger.error(f"Error updating shift {record_id} for {account_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update shift")

    if not replaced:
        raise HTTPException(status_code=404, detail=f"Shift {record_id} not found")

    logger.info(f"Updated shift {record_id} for {account_id}")
    return record

@router.delete("/accounts/{account_id}/shifts/{record_id}", status_code=204)
async def delete_shift(account_id: str, record_id: int):
    if not record_store.delete_record(account_id, record_id):
        raise HTTPException(status_code=404, detail=f"Shift {record_id} not found")
    logger.info(f"Deleted shift {record_id} for {account_id}")
    return Response(status_code=204)
