from __future__ import annotations

from datetime import date, datetime

from src.staffsnap.staffsnap.attendance.model import Coordinates
from src.staffsnap.staffsnap.core.enums import AttendanceKind
from src.staffsnap.staffsnap.reports.aggregator import aggregate
from src.staffsnap.staffsnap.reports.export import (
    detailed_filename,
    render_detailed_csv,
    render_summary_csv,
    summary_filename,
)

from tests.factories import scan, staff


def test_detailed_csv_escapes_embedded_quotes():
    events = [scan("Alice", datetime(2026, 3, 5, 9, 15, 0), greeting='He said "hi"')]

    lines = render_detailed_csv(events).splitlines()

    assert lines[0] == "Date,Time,Staff Name,Action,Location,AI Greeting"
    assert lines[1] == '2026-03-05,09:15:00,Alice,CLOCK IN,N/A,"He said ""hi"""'


def test_detailed_csv_formats_location_and_orders_newest_first():
    events = [
        scan("Alice", datetime(2026, 3, 5, 9, 0), location=Coordinates(40.7128, -74.006)),
        scan("Bob", datetime(2026, 3, 6, 17, 0), kind=AttendanceKind.CLOCK_OUT, greeting="Bye, Bob"),
    ]

    lines = render_detailed_csv(events).splitlines()

    assert lines[1] == '2026-03-06,17:00:00,Bob,CLOCK OUT,N/A,"Bye, Bob"'
    assert lines[2] == '2026-03-05,09:00:00,Alice,CLOCK IN,"40.712800, -74.006000",'


def test_summary_csv_follows_aggregator_rows(fixed_now):
    rows = aggregate([scan("Alice", datetime(2026, 3, 5, 9, 0))], [staff("Alice")], fixed_now)

    lines = render_summary_csv(rows).splitlines()

    assert lines == [
        "Staff Name,Month,Year,Total Present,Total Absent,Total Scans",
        "Alice,March,2026,1,9,1",
    ]


def test_export_filenames_carry_the_date():
    assert detailed_filename(date(2026, 3, 10)) == "detailed_attendance_logs_2026-03-10.csv"
    assert summary_filename(date(2026, 3, 10)) == "monthly_attendance_summary_2026-03-10.csv"
