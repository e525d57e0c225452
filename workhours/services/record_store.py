import json
import logging
from datetime import datetime
from typing import List, Optional

from workhours.core.database import get_db
from workhours.models.shift import ShiftRecord, Project

logger = logging.getLogger(__name__)

_RECORD_COLUMNS = '''
    record_id, account_id, work_date, start_time, end_time, break_minutes,
    project_id, hourly_rate, notes, colleagues, task_description,
    hours_worked, hour_classification, created_at
'''

def record_from_row(row) -> ShiftRecord:
    return ShiftRecord(
        record_id=row['record_id'],
        account_id=row['account_id'],
        date=row['work_date'],
        start_time=row['start_time'],
        end_time=row['end_time'],
        break_minutes=row['break_minutes'],
        project_id=row['project_id'],
        hourly_rate=row['hourly_rate'],
        notes=row['notes'],
        colleagues=row['colleagues'],
        task_description=row['task_description'],
        hours_worked=row['hours_worked'],
        hour_classification=json.loads(row['hour_classification']),
        created_at=datetime.fromisoformat(row['created_at']),
    )

def _record_params(record: ShiftRecord) -> tuple:
    return (
        record.date,
        record.start_time,
        record.end_time,
        record.break_minutes,
        record.project_id,
        record.hourly_rate,
        record.notes,
        record.colleagues,
        record.task_description,
        record.hours_worked,
        json.dumps(record.hour_classification),
    )

def list_records(account_id: str) -> List[ShiftRecord]:
    """All records of an account, newest shift first"""
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(f'''
            SELECT {_RECORD_COLUMNS} FROM shift_records
            WHERE account_id = ?
            ORDER BY work_date DESC, record_id DESC
        ''', (account_id,))
        return [record_from_row(row) for row in cursor.fetchall()]

def get_record(account_id: str, record_id: int) -> Optional[ShiftRecord]:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(f'''
            SELECT {_RECORD_COLUMNS} FROM shift_records
            WHERE account_id = ? AND record_id = ?
        ''', (account_id, record_id))
        row = cursor.fetchone()
        return record_from_row(row) if row else None

def insert_record(record: ShiftRecord) -> ShiftRecord:
    """Store a fully computed record and return it with its new id"""
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute('''
            INSERT INTO shift_records (
                work_date, start_time, end_time, break_minutes, project_id,
                hourly_rate, notes, colleagues, task_description,
                hours_worked, hour_classification, account_id, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        ''', _record_params(record) + (record.account_id, record.created_at.isoformat()))
        conn.commit()
        return record.model_copy(update={'record_id': cursor.lastrowid})

def replace_record(record: ShiftRecord) -> bool:
    """Overwrite every stored field of an existing record. False if it's gone."""
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute('''
            UPDATE shift_records SET
                work_date = ?, start_time = ?, end_time = ?, break_minutes = ?,
                project_id = ?, hourly_rate = ?, notes = ?, colleagues = ?,
                task_description = ?, hours_worked = ?, hour_classification = ?
            WHERE account_id = ? AND record_id = ?
        ''', _record_params(record) + (record.account_id, record.record_id))
        conn.commit()
        return cursor.rowcount > 0

def delete_record(account_id: str, record_id: int) -> bool:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "DELETE FROM shift_records WHERE account_id = ? AND record_id = ?",
            (account_id, record_id),
        )
        conn.commit()
        return cursor.rowcount > 0

def list_projects(account_id: str) -> List[Project]:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute('''
            SELECT project_id, name, code FROM projects
            WHERE account_id = ?
            ORDER BY name
        ''', (account_id,))
        return [
            Project(project_id=row['project_id'], name=row['name'], code=row['code'])
            for row in cursor.fetchall()
        ]
