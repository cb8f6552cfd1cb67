from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.enums import Role
from ..users.repository import UserRepository
from .aggregator import MonthlySummary, aggregate
from .export import detailed_filename, render_detailed_csv, render_summary_csv, summary_filename


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


class ReportService:
    """Admin reports, recomputed from the current records on every call."""

    def __init__(self, attendance: AttendanceRepository, users: UserRepository):
        self._attendance = attendance
        self._users = users

    def monthly_summary(self, *, now: datetime | None = None) -> list[MonthlySummary]:
        roster = self._users.list_by_role(Role.STAFF)
        return aggregate(self._attendance.list_all(), roster, now or now_local())

    def export_detailed(self, *, now: datetime | None = None) -> CsvExport:
        now = now or now_local()
        return CsvExport(
            filename=detailed_filename(now.date()),
            content=render_detailed_csv(self._attendance.list_all()),
        )

    def export_summary(self, *, now: datetime | None = None) -> CsvExport:
        now = now or now_local()
        return CsvExport(
            filename=summary_filename(now.date()),
            content=render_summary_csv(self.monthly_summary(now=now)),
        )
