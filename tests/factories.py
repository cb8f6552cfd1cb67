from __future__ import annotations

from datetime import datetime

from src.staffsnap.staffsnap.attendance.model import AttendanceEvent, Coordinates
from src.staffsnap.staffsnap.core.enums import AttendanceKind, Role
from src.staffsnap.staffsnap.users.model import StaffMember

_counter = {"n": 0}


def staff(name: str, user_id: str | None = None) -> StaffMember:
    _counter["n"] += 1
    uid = user_id or f"u{_counter['n']}"
    return StaffMember(user_id=uid, username=name.lower().replace(" ", ""), display_name=name, role=Role.STAFF)


def scan(
    name: str,
    at: datetime,
    *,
    kind: AttendanceKind = AttendanceKind.CLOCK_IN,
    greeting: str | None = None,
    location: Coordinates | None = None,
) -> AttendanceEvent:
    _counter["n"] += 1
    return AttendanceEvent(
        event_id=f"e{_counter['n']}",
        staff_name=name,
        timestamp=at,
        photo="data:image/jpeg;base64,",
        kind=kind,
        greeting=greeting,
        location=location,
    )
