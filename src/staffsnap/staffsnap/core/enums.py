from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for authorization."""

    ADMIN = "ADMIN"
    STAFF = "STAFF"


class AttendanceKind(str, Enum):
    """The two scan kinds marking a shift start/end."""

    CLOCK_IN = "CLOCK_IN"
    CLOCK_OUT = "CLOCK_OUT"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")

    @classmethod
    def from_slug(cls, slug: str) -> "AttendanceKind":
        """Map URL slugs like ``clock-in`` to a kind."""
        return cls(slug.strip().upper().replace("-", "_"))


class CameraStatus(str, Enum):
    """States of a capture session."""

    IDLE = "IDLE"
    ACTIVE = "ACTIVE"
    CAPTURING = "CAPTURING"
    DENIED = "DENIED"


class LocationAccuracy(str, Enum):
    """Named geolocation request profiles."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
