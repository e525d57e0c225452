import logging
import re

from fastapi import APIRouter, HTTPException, Response
from workhours.models.report import HistoryReport, FilterOptions, HoursStats
from workhours.services import record_store
from workhours.services.history_service import filter_and_group, available_filters, calculate_stats
from workhours.services.export_service import generate_history_csv

router = APIRouter()
logger = logging.getLogger(__name__)

def _build_report(account_id: str, year: str, month: str, week: str) -> HistoryReport:
    records = record_store.list_records(account_id)
    try:
        return filter_and_group(records, year, month, week)
    except ValueError:
        raise HTTPException(status_code=400, detail="Filters must be a number or 'all'")

@router.get("/accounts/{account_id}/history", response_model=HistoryReport)
async def get_history(account_id: str, year: str = "all", month: str = "all", week: str = "all"):
    """Shifts filtered by year, zero-based month and ISO week, grouped by week"""
    return _build_report(account_id, year, month, week)

@router.get("/accounts/{account_id}/history/filters", response_model=FilterOptions)
async def get_history_filters(account_id: str, year: str = "all", month: str = "all"):
    """Years, months and weeks to offer for the current selection"""
    records = record_store.list_records(account_id)
    try:
        return available_filters(records, year, month)
    except ValueError:
        raise HTTPException(status_code=400, detail="Filters must be a number or 'all'")

@router.get("/accounts/{account_id}/history/export")
async def export_history(account_id: str, year: str = "all", month: str = "all", week: str = "all"):
    """Export the filtered history as CSV"""
    report = _build_report(account_id, year, month, week)
    project_names = {p.project_id: p.name for p in record_store.list_projects(account_id)}
    csv_content = generate_history_csv(report, project_names)

    # Header values must stay Latin-1; the filters are already normalized
    safe_account = re.sub(r"[^A-Za-z0-9_-]+", "_", account_id).strip("_") or "account"
    filename = f"history_{safe_account}_{report.year}_{report.month}_{report.week}.csv"
    return Response(
        content=csv_content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )

@router.get("/accounts/{account_id}/stats", response_model=HoursStats)
async def get_stats(account_id: str):
    """Hours by ISO week and by project"""
    try:
        records = record_store.list_records(account_id)
        projects = record_store.list_projects(account_id)
        return calculate_stats(records, projects)
    except Exception as e:
        logger.error(f"Error generating stats for {account_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate stats")
