from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import timestamp_id
from ..common.log import get_logger
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceKind, Role
from ..core.exceptions import ValidationError
from ..users.repository import UserRepository
from .enrichment import RecordEnricher
from .geolocation import GeolocationProvider, PositionOptions
from .model import AttendanceEvent
from .repository import AttendanceRepository

log = get_logger("attendance")


@dataclass(frozen=True)
class TodayStats:
    scans_today: int
    active_staff_today: int
    roster_size: int


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        enricher: RecordEnricher,
        *,
        id_factory: Callable[[], str] | None = None,
    ):
        self._attendance = attendance
        self._users = users
        self._enricher = enricher
        self._new_id = id_factory or timestamp_id

    def begin(self, *, staff_name: str, kind: AttendanceKind, image: str, now: datetime | None = None) -> AttendanceEvent:
        """Store the provisional (pending) record right after capture."""
        if not image:
            raise ValidationError("No image captured")

        event = AttendanceEvent(
            event_id=self._new_id(),
            staff_name=staff_name,
            timestamp=now or now_local(),
            photo=image,
            kind=kind,
            pending=True,
        )
        self._attendance.upsert(event)
        log.info("%s recorded for %r (pending enrichment)", kind.value, staff_name)
        return event

    async def complete(
        self,
        event: AttendanceEvent,
        *,
        geolocation: GeolocationProvider,
        options: PositionOptions,
    ) -> AttendanceEvent:
        final = await self._enricher.enrich(event, event.photo, geolocation=geolocation, options=options)
        self._attendance.upsert(final)
        log.info("record %s enriched (location=%s)", final.event_id, "yes" if final.location else "no")
        return final

    async def record_scan(
        self,
        *,
        staff_name: str,
        kind: AttendanceKind,
        image: str,
        geolocation: GeolocationProvider,
        options: PositionOptions,
        now: datetime | None = None,
    ) -> AttendanceEvent:
        event = self.begin(staff_name=staff_name, kind=kind, image=image, now=now)
        return await self.complete(event, geolocation=geolocation, options=options)

    def history_for(self, staff_name: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceEvent]:
        rows = sorted(self._attendance.list_for_staff(staff_name), key=lambda r: r.timestamp, reverse=True)
        return rows[:limit]

    def all_records(self) -> Sequence[AttendanceEvent]:
        return sorted(self._attendance.list_all(), key=lambda r: r.timestamp, reverse=True)

    def today_stats(self, *, now: datetime | None = None) -> TodayStats:
        today = (now or now_local()).date()
        todays = [r for r in self._attendance.list_all() if r.timestamp.date() == today]
        return TodayStats(
            scans_today=len(todays),
            active_staff_today=len({r.staff_name for r in todays}),
            roster_size=len(self._users.list_by_role(Role.STAFF)),
        )
