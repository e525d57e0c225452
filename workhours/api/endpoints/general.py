import logging

from fastapi import APIRouter, HTTPException
from workhours.core.config import ServerConfig, ShiftFormConfig
from workhours.core.database import get_db
from workhours.models.shift import PayBucket

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/")
async def root():
    return {
        "message": ServerConfig.APP_NAME,
        "version": ServerConfig.APP_VERSION,
        "description": ServerConfig.APP_DESCRIPTION,
        "status": "running",
    }

@router.get("/config")
async def get_public_config():
    """Get public configuration information"""
    return {
        "app_name": ServerConfig.APP_NAME,
        "app_version": ServerConfig.APP_VERSION,
        "break_minute_options": ShiftFormConfig.BREAK_MINUTE_OPTIONS,
        "pay_buckets": {bucket.value: bucket.label for bucket in PayBucket},
        "development_mode": ServerConfig.DEVELOPMENT_MODE,
    }

@router.get("/health")
async def health_check():
    """Health check with record count"""
    try:
        with get_db() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.execute("SELECT COUNT(*) FROM shift_records")
            record_count = cursor.fetchone()[0]

            return {
                "status": "healthy",
                "database": "connected",
                "shift_records": record_count,
            }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(status_code=503, detail="Service unavailable")
