from __future__ import annotations

from datetime import datetime

from src.staffsnap.staffsnap.core.enums import Role
from src.staffsnap.staffsnap.reports.service import ReportService
from src.staffsnap.staffsnap.users.model import StaffMember

from tests.factories import scan, staff


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows

    def list_all(self):
        return list(self._rows)


class FakeUsersRepo:
    def __init__(self, members):
        self._members = members
        self.last_role = None

    def list_by_role(self, role: Role):
        self.last_role = role
        return [m for m in self._members if m.role == role]


def test_summary_only_covers_staff_role(fixed_now):
    admin = StaffMember(user_id="1", username="admin", display_name="Administrator", role=Role.ADMIN)
    alice = staff("Alice")
    users = FakeUsersRepo([admin, alice])

    svc = ReportService(FakeAttendanceRepo([scan("Alice", datetime(2026, 3, 9, 8, 0))]), users)
    summary = svc.monthly_summary(now=fixed_now)

    assert users.last_role == Role.STAFF
    assert [r.staff_name for r in summary] == ["Alice"]
    assert summary[0].days_present == 1


def test_summary_recomputes_when_records_change(fixed_now):
    rows = []
    svc = ReportService(FakeAttendanceRepo(rows), FakeUsersRepo([staff("Alice")]))

    assert svc.monthly_summary(now=fixed_now)[0].total_scans == 0

    rows.append(scan("Alice", datetime(2026, 3, 9, 8, 0)))
    svc = ReportService(FakeAttendanceRepo(rows), FakeUsersRepo([staff("Alice")]))
    assert svc.monthly_summary(now=fixed_now)[0].total_scans == 1


def test_exports_use_dated_filenames(fixed_now):
    svc = ReportService(FakeAttendanceRepo([]), FakeUsersRepo([staff("Alice")]))

    detailed = svc.export_detailed(now=fixed_now)
    summary = svc.export_summary(now=fixed_now)

    assert detailed.filename == "detailed_attendance_logs_2026-03-10.csv"
    assert detailed.content.splitlines() == ["Date,Time,Staff Name,Action,Location,AI Greeting"]
    assert summary.filename == "monthly_attendance_summary_2026-03-10.csv"
    assert summary.content.splitlines()[1] == "Alice,March,2026,0,10,0"
