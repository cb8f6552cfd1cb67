from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Callable

from ..attendance.model import AttendanceEvent
from ..users.model import StaffMember


@dataclass(frozen=True)
class AppState:
    """Everything the app knows: the roster and the scan log (newest first)."""

    users: tuple[StaffMember, ...] = ()
    records: tuple[AttendanceEvent, ...] = ()


def upsert_record(state: AppState, event: AttendanceEvent) -> AppState:
    if any(r.event_id == event.event_id for r in state.records):
        records = tuple(event if r.event_id == event.event_id else r for r in state.records)
    else:
        records = (event,) + state.records
    return replace(state, records=records)


def add_user(state: AppState, member: StaffMember) -> AppState:
    return replace(state, users=state.users + (member,))


class StateStore:
    """Holds the current AppState; updates are applied atomically.

    Note: Flask may serve requests from several threads, so read-modify-write
    goes through ``apply``.
    """

    def __init__(self, initial: AppState | None = None):
        self._state = initial or AppState()
        self._lock = threading.Lock()

    @property
    def state(self) -> AppState:
        return self._state

    def apply(self, fn: Callable[[AppState], AppState]) -> AppState:
        with self._lock:
            self._state = fn(self._state)
            return self._state
