from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceEvent


class AttendanceRepository(Protocol):
    def upsert(self, event: AttendanceEvent) -> None:
        """Replace the event with the same id in place, or add it as newest."""

        raise NotImplementedError

    def get_by_id(self, event_id: str) -> Optional[AttendanceEvent]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceEvent]:
        """Every event, most recently added first."""

        raise NotImplementedError

    def list_for_staff(self, staff_name: str) -> Sequence[AttendanceEvent]:
        raise NotImplementedError
