"""Monthly attendance aggregation.

For every (year, month) period touched by an event, plus the period of the
reference instant, emit one summary row per staff member in roster order.
Periods come newest first.

Note: events are matched to staff by display name, not by id, so two staff
members sharing a display name are counted together.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence

from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import days_in_month, month_name
from ..users.model import StaffMember


@dataclass(frozen=True, order=True)
class Period:
    year: int
    month: int  # 1-12

    @classmethod
    def containing(cls, instant: datetime) -> "Period":
        return cls(instant.year, instant.month)

    @property
    def label(self) -> str:
        return month_name(self.month)

    def days_elapsed(self, reference: datetime) -> int:
        current = Period.containing(reference)
        if self == current:
            return reference.day
        if self < current:
            return days_in_month(self.year, self.month)
        return 0


@dataclass(frozen=True)
class MonthlySummary:
    key: str
    staff_name: str
    month_label: str
    year: int
    month: int
    days_present: int
    days_absent: int
    total_scans: int

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "staff_name": self.staff_name,
            "month": self.month_label,
            "year": self.year,
            "present": self.days_present,
            "absent": self.days_absent,
            "total_scans": self.total_scans,
        }


def reporting_periods(events: Iterable[AttendanceEvent], reference: datetime) -> list[Period]:
    periods = {Period.containing(reference)}
    periods.update(Period.containing(e.timestamp) for e in events)
    return sorted(periods, reverse=True)


def aggregate(
    events: Sequence[AttendanceEvent],
    roster: Sequence[StaffMember],
    reference: datetime,
) -> list[MonthlySummary]:
    rows: list[MonthlySummary] = []

    for period in reporting_periods(events, reference):
        elapsed = period.days_elapsed(reference)
        in_period = [e for e in events if Period.containing(e.timestamp) == period]

        for member in roster:
            scans = [e for e in in_period if e.staff_name == member.display_name]
            present = len({e.timestamp.date() for e in scans})
            rows.append(
                MonthlySummary(
                    key=f"{member.user_id}-{period.year}-{period.month:02d}",
                    staff_name=member.display_name,
                    month_label=period.label,
                    year=period.year,
                    month=period.month,
                    days_present=present,
                    days_absent=max(0, elapsed - present),
                    total_scans=len(scans),
                )
            )

    return rows
