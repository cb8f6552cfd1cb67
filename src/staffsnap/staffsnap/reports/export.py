from __future__ import annotations

import csv
import io
from datetime import date
from typing import Sequence

from ..attendance.model import AttendanceEvent
from .aggregator import MonthlySummary

DETAILED_HEADERS = ["Date", "Time", "Staff Name", "Action", "Location", "AI Greeting"]
SUMMARY_HEADERS = ["Staff Name", "Month", "Year", "Total Present", "Total Absent", "Total Scans"]


def _writer(out: io.StringIO):
    # QUOTE_MINIMAL: fields with a comma or quote are wrapped, embedded quotes doubled
    return csv.writer(out, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")


def format_location(event: AttendanceEvent) -> str:
    if not event.location:
        return "N/A"
    return f"{event.location.latitude:.6f}, {event.location.longitude:.6f}"


def render_detailed_csv(events: Sequence[AttendanceEvent]) -> str:
    """Detailed log, newest scan first."""
    out = io.StringIO()
    writer = _writer(out)
    writer.writerow(DETAILED_HEADERS)
    for e in sorted(events, key=lambda r: r.timestamp, reverse=True):
        writer.writerow(
            [
                e.timestamp.strftime("%Y-%m-%d"),
                e.timestamp.strftime("%H:%M:%S"),
                e.staff_name,
                e.kind.label,
                format_location(e),
                e.greeting or "",
            ]
        )
    return out.getvalue()


def render_summary_csv(summaries: Sequence[MonthlySummary]) -> str:
    out = io.StringIO()
    writer = _writer(out)
    writer.writerow(SUMMARY_HEADERS)
    for s in summaries:
        writer.writerow([s.staff_name, s.month_label, s.year, s.days_present, s.days_absent, s.total_scans])
    return out.getvalue()


def detailed_filename(today: date) -> str:
    return f"detailed_attendance_logs_{today.isoformat()}.csv"


def summary_filename(today: date) -> str:
    return f"monthly_attendance_summary_{today.isoformat()}.csv"
