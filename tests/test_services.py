from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.staffsnap.staffsnap.attendance.enrichment import RecordEnricher
from src.staffsnap.staffsnap.attendance.geolocation import ReportedPosition, options_for
from src.staffsnap.staffsnap.attendance.greeting import FallbackGreetingProvider
from src.staffsnap.staffsnap.attendance.model import AttendanceEvent, Coordinates
from src.staffsnap.staffsnap.attendance.service import AttendanceService
from src.staffsnap.staffsnap.core.enums import AttendanceKind, Role
from src.staffsnap.staffsnap.core.exceptions import AuthenticationError, ValidationError
from src.staffsnap.staffsnap.users.model import StaffMember
from src.staffsnap.staffsnap.users.service import AuthService, UserService


@dataclass
class InMemoryUsers:
    members: list[StaffMember] = field(default_factory=list)

    def get_by_id(self, user_id: str) -> Optional[StaffMember]:
        return next((m for m in self.members if m.user_id == user_id), None)

    def get_by_username(self, username: str) -> Optional[StaffMember]:
        return next((m for m in self.members if m.username == username), None)

    def add(self, member: StaffMember) -> StaffMember:
        self.members.append(member)
        return member

    def list_by_role(self, role: Role):
        return [m for m in self.members if m.role == role]


class InMemoryAttendance:
    def __init__(self):
        self.records: list[AttendanceEvent] = []
        self.history: list[AttendanceEvent] = []

    def upsert(self, event: AttendanceEvent) -> None:
        self.history.append(event)
        for i, r in enumerate(self.records):
            if r.event_id == event.event_id:
                self.records[i] = event
                return
        self.records.insert(0, event)

    def get_by_id(self, event_id: str):
        return next((r for r in self.records if r.event_id == event_id), None)

    def list_all(self):
        return list(self.records)

    def list_for_staff(self, staff_name: str):
        return [r for r in self.records if r.staff_name == staff_name]


def _ids():
    n = iter(range(1, 1000))
    return lambda: str(next(n))


def test_auth_wrong_password_raises():
    user = StaffMember("1", "a", "A", Role.STAFF, generate_password_hash("right"))
    auth = AuthService(InMemoryUsers([user]))

    with pytest.raises(AuthenticationError, match="Invalid credentials."):
        auth.authenticate("a", "wrong")


def test_auth_unknown_user_raises():
    with pytest.raises(AuthenticationError):
        AuthService(InMemoryUsers()).authenticate("ghost", "pw")


def test_auth_returns_session_user():
    user = StaffMember("2", "staff", "Alex Chen", Role.STAFF, generate_password_hash("staff"))

    s_user = AuthService(InMemoryUsers([user])).authenticate("staff", "staff")

    assert (s_user.user_id, s_user.display_name, s_user.role) == ("2", "Alex Chen", Role.STAFF)


def test_register_admin_requires_every_field():
    svc = UserService(InMemoryUsers(), id_factory=_ids())

    with pytest.raises(ValidationError, match="All fields are required"):
        svc.register_admin(display_name="", username="boss", password="pw")


def test_register_rejects_duplicate_username():
    users = InMemoryUsers()
    svc = UserService(users, id_factory=_ids())
    svc.create_staff(display_name="Jane Doe", username="janed", password="pw")

    with pytest.raises(ValidationError, match="Username already exists"):
        svc.register_admin(display_name="Jane Admin", username="janed", password="pw2")


def test_created_accounts_get_roles_and_hashed_passwords():
    users = InMemoryUsers()
    svc = UserService(users, id_factory=_ids())

    admin = svc.register_admin(display_name="Boss", username="boss", password="pw")
    member = svc.create_staff(display_name="Jane Doe", username="janed", password="secret")

    assert admin.role == Role.ADMIN
    assert member.role == Role.STAFF
    assert member.password_hash != "secret"
    assert [m.display_name for m in svc.list_staff()] == ["Jane Doe"]
    assert AuthService(users).authenticate("janed", "secret").display_name == "Jane Doe"


def test_record_scan_stores_pending_then_final(fixed_now):
    attendance = InMemoryAttendance()
    svc = AttendanceService(attendance, InMemoryUsers(), RecordEnricher(FallbackGreetingProvider()), id_factory=_ids())

    final = asyncio.run(
        svc.record_scan(
            staff_name="Alex Chen",
            kind=AttendanceKind.CLOCK_IN,
            image="data:image/jpeg;base64,QUJD",
            geolocation=ReportedPosition(1.0, 2.0),
            options=options_for("high"),
            now=fixed_now,
        )
    )

    first, last = attendance.history
    assert first.pending is True and first.greeting is None and first.location is None
    assert last == final
    assert final.event_id == first.event_id
    assert final.pending is False
    assert final.greeting == "Welcome, Alex Chen. Have a great day!"
    assert final.location == Coordinates(1.0, 2.0)
    assert attendance.records == [final]


def test_begin_requires_an_image(fixed_now):
    svc = AttendanceService(InMemoryAttendance(), InMemoryUsers(), RecordEnricher(FallbackGreetingProvider()))

    with pytest.raises(ValidationError):
        svc.begin(staff_name="Alex Chen", kind=AttendanceKind.CLOCK_IN, image="", now=fixed_now)


def test_history_and_today_stats(fixed_now):
    attendance = InMemoryAttendance()
    users = InMemoryUsers([StaffMember("2", "staff", "Alex Chen", Role.STAFF)])
    svc = AttendanceService(attendance, users, RecordEnricher(FallbackGreetingProvider()), id_factory=_ids())

    svc.begin(staff_name="Alex Chen", kind=AttendanceKind.CLOCK_IN, image="x", now=datetime(2026, 3, 9, 9, 0))
    svc.begin(staff_name="Alex Chen", kind=AttendanceKind.CLOCK_IN, image="x", now=fixed_now.replace(hour=8))
    svc.begin(staff_name="Sarah Jones", kind=AttendanceKind.CLOCK_IN, image="x", now=fixed_now.replace(hour=9))
    svc.begin(staff_name="Alex Chen", kind=AttendanceKind.CLOCK_OUT, image="x", now=fixed_now.replace(hour=11))

    history = svc.history_for("Alex Chen")
    assert [r.kind for r in history] == [AttendanceKind.CLOCK_OUT, AttendanceKind.CLOCK_IN, AttendanceKind.CLOCK_IN]
    assert history[0].timestamp > history[1].timestamp > history[2].timestamp

    stats = svc.today_stats(now=fixed_now)
    assert (stats.scans_today, stats.active_staff_today, stats.roster_size) == (3, 2, 1)
