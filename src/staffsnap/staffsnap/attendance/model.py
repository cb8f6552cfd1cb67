from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceKind


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one clock-in/clock-out scan.

    Created with ``pending=True`` at capture time and replaced (same
    ``event_id``) once the greeting and location lookups have settled.
    """

    event_id: str
    staff_name: str
    timestamp: datetime
    photo: str
    kind: AttendanceKind
    greeting: Optional[str] = None
    pending: bool = False
    location: Optional[Coordinates] = None

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "staff_name": self.staff_name,
            "timestamp": self.timestamp.isoformat(timespec="seconds"),
            "photo": self.photo,
            "kind": self.kind.value,
            "greeting": self.greeting,
            "pending": self.pending,
            "location": (
                {"latitude": self.location.latitude, "longitude": self.location.longitude}
                if self.location
                else None
            ),
        }
