"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the attendance and report logic lives in services.
"""

import asyncio

import numpy as np

from src.staffsnap.staffsnap.attendance.geolocation import ReportedPosition, options_for
from src.staffsnap.staffsnap.capture.snapshot import encode_snapshot
from src.staffsnap.staffsnap.container import build_container
from src.staffsnap.staffsnap.core.enums import AttendanceKind
from src.staffsnap.staffsnap.main import load_settings


def main():
    _, settings = load_settings({"SEED_DEMO_DATA": True})
    container = build_container(settings=settings)

    record = asyncio.run(
        container.attendance_service.record_scan(
            staff_name="Alex Chen",
            kind=AttendanceKind.CLOCK_IN,
            image=encode_snapshot(np.zeros((120, 160, 3), dtype=np.uint8)),
            geolocation=ReportedPosition(40.7128, -74.0060),
            options=options_for("high"),
        )
    )
    print(record.greeting)

    for row in container.report_service.monthly_summary():
        print(row.staff_name, row.month_label, row.year, row.days_present, row.days_absent, row.total_scans)


if __name__ == "__main__":
    main()
