"""Demo accounts and records loaded at startup when SEED_DEMO_DATA is on."""
from __future__ import annotations

from datetime import datetime, timedelta

from werkzeug.security import generate_password_hash

from ..attendance.model import AttendanceEvent, Coordinates
from ..common.datetime_utils import now_local
from ..core.enums import AttendanceKind, Role
from ..users.model import StaffMember
from .app_state import AppState


def demo_users() -> tuple[StaffMember, ...]:
    return (
        StaffMember("1", "admin", "Administrator", Role.ADMIN, generate_password_hash("admin")),
        StaffMember("2", "staff", "Alex Chen", Role.STAFF, generate_password_hash("staff")),
    )


def demo_records(now: datetime) -> tuple[AttendanceEvent, ...]:
    return (
        AttendanceEvent(
            event_id="mock-1",
            staff_name="Sarah Jones",
            timestamp=now - timedelta(hours=1),
            photo="https://images.unsplash.com/photo-1494790108377-be9c29b29330?auto=format&fit=crop&w=150&q=80",
            kind=AttendanceKind.CLOCK_IN,
            greeting="Welcome Sarah! Your smile brightens the office today.",
            location=Coordinates(40.7128, -74.0060),
        ),
        AttendanceEvent(
            event_id="mock-2",
            staff_name="Mike Ross",
            timestamp=now - timedelta(hours=2),
            photo="https://images.unsplash.com/photo-1500648767791-00dcc994a43e?auto=format&fit=crop&w=150&q=80",
            kind=AttendanceKind.CLOCK_IN,
            greeting="Good morning Mike, ready to tackle the day!",
            location=Coordinates(40.7130, -74.0055),
        ),
    )


def demo_state(now: datetime | None = None) -> AppState:
    return AppState(users=demo_users(), records=demo_records(now or now_local()))
