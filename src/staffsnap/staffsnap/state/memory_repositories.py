from __future__ import annotations

from typing import Optional, Sequence

from ..attendance.model import AttendanceEvent
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.model import StaffMember
from .app_state import AppState, StateStore, add_user, upsert_record


class InMemoryUserRepository:
    def __init__(self, store: StateStore):
        self._store = store

    def get_by_id(self, user_id: str) -> Optional[StaffMember]:
        return next((u for u in self._store.state.users if u.user_id == user_id), None)

    def get_by_username(self, username: str) -> Optional[StaffMember]:
        return next((u for u in self._store.state.users if u.username == username), None)

    def add(self, member: StaffMember) -> StaffMember:
        def _add_unique(state: AppState) -> AppState:
            if any(u.username == member.username for u in state.users):
                raise ValidationError("Username already exists")
            return add_user(state, member)

        self._store.apply(_add_unique)
        return member

    def list_by_role(self, role: Role) -> Sequence[StaffMember]:
        return [u for u in self._store.state.users if u.role == role]


class InMemoryAttendanceRepository:
    def __init__(self, store: StateStore):
        self._store = store

    def upsert(self, event: AttendanceEvent) -> None:
        self._store.apply(lambda s: upsert_record(s, event))

    def get_by_id(self, event_id: str) -> Optional[AttendanceEvent]:
        return next((r for r in self._store.state.records if r.event_id == event_id), None)

    def list_all(self) -> Sequence[AttendanceEvent]:
        return list(self._store.state.records)

    def list_for_staff(self, staff_name: str) -> Sequence[AttendanceEvent]:
        return [r for r in self._store.state.records if r.staff_name == staff_name]
