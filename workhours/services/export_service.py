import csv
import io
from typing import Dict

from workhours.models.shift import PayBucket
from workhours.models.report import HistoryReport
from workhours.services.history_service import week_start, sum_classifications
from workhours.core.timeparse import parse_date

def generate_history_csv(report: HistoryReport, project_names: Dict[str, str] = None) -> str:
    """Generate CSV for a filtered history report, one row per shift plus totals"""
    project_names = project_names or {}

    output = io.StringIO()
    writer = csv.writer(output)

    # Header
    writer.writerow(
        ['Date', 'Week Start', 'ISO Week', 'Start', 'End', 'Break (min)', 'Hours Worked']
        + [bucket.label for bucket in PayBucket]
        + ['Project', 'Notes']
    )

    # Data rows; the report only holds records with a valid date
    for record in report.records:
        day = parse_date(record.date)
        classification = sum_classifications([record])
        writer.writerow(
            [
                record.date,
                week_start(day).isoformat(),
                day.isocalendar()[1],
                record.start_time,
                record.end_time,
                record.break_minutes,
                record.hours_worked,
            ]
            + [classification[bucket.value] for bucket in PayBucket]
            + [project_names.get(record.project_id, record.project_id), record.notes]
        )

    writer.writerow(
        ['TOTAL', '', '', '', '', '', report.totals.total_hours]
        + [report.totals.by_bucket[bucket.value] for bucket in PayBucket]
        + ['', '']
    )

    return output.getvalue()
