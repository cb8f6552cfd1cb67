"""Device position lookup with named accuracy profiles.

Every provider resolves to ``Coordinates`` or ``None``; unsupported devices,
denied permission and timeouts are absorbed here.
"""
from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Protocol

from ..common.datetime_utils import now_local
from ..common.log import get_logger
from ..core.enums import LocationAccuracy
from ..core.exceptions import GeolocationError
from .model import Coordinates

log = get_logger("geolocation")


@dataclass(frozen=True)
class PositionOptions:
    enable_high_accuracy: bool
    timeout: float
    maximum_age: float

    def to_dict(self) -> dict:
        # milliseconds, the unit browser geolocation APIs expect; None = unbounded
        return {
            "enableHighAccuracy": self.enable_high_accuracy,
            "timeout": int(self.timeout * 1000),
            "maximumAge": None if math.isinf(self.maximum_age) else int(self.maximum_age * 1000),
        }


POSITION_PROFILES: dict[LocationAccuracy, PositionOptions] = {
    LocationAccuracy.HIGH: PositionOptions(enable_high_accuracy=True, timeout=10.0, maximum_age=0.0),
    LocationAccuracy.MEDIUM: PositionOptions(enable_high_accuracy=True, timeout=5.0, maximum_age=60.0),
    LocationAccuracy.LOW: PositionOptions(enable_high_accuracy=False, timeout=5.0, maximum_age=math.inf),
}


def options_for(accuracy: LocationAccuracy | str) -> PositionOptions:
    return POSITION_PROFILES[LocationAccuracy(accuracy)]


class GeolocationProvider(Protocol):
    async def get_current_position(self, options: PositionOptions) -> Optional[Coordinates]:
        raise NotImplementedError


class PositionSource(Protocol):
    """Host capability that produces a reading or raises GeolocationError."""

    async def read_position(self, *, enable_high_accuracy: bool) -> Coordinates:
        raise NotImplementedError


class FixedPositionSource:
    """A host whose position is configured, e.g. a wall-mounted kiosk."""

    def __init__(self, latitude: float, longitude: float):
        self._coords = Coordinates(latitude=float(latitude), longitude=float(longitude))

    async def read_position(self, *, enable_high_accuracy: bool) -> Coordinates:
        return self._coords


class ReportedPosition:
    """Position already resolved by the client (browser) and sent with the scan.

    The browser applies the profile options itself, so this provider only
    forwards what was reported.
    """

    def __init__(self, latitude: object = None, longitude: object = None):
        self._coords: Optional[Coordinates] = None
        if latitude is None or longitude is None or latitude == "" or longitude == "":
            return
        try:
            self._coords = Coordinates(latitude=float(latitude), longitude=float(longitude))
        except (TypeError, ValueError):
            log.info("ignoring malformed reported position %r, %r", latitude, longitude)

    async def get_current_position(self, options: PositionOptions) -> Optional[Coordinates]:
        return self._coords


@dataclass(frozen=True)
class _Reading:
    coords: Coordinates
    taken_at: datetime


class DeviceGeolocation:
    """Reads a PositionSource honoring timeout and maximum cached age."""

    def __init__(self, source: PositionSource | None, *, clock: Callable[[], datetime] = now_local):
        self._source = source
        self._clock = clock
        self._last: Optional[_Reading] = None

    def _cached(self, maximum_age: float) -> Optional[Coordinates]:
        if self._last is None or maximum_age <= 0:
            return None
        age = (self._clock() - self._last.taken_at).total_seconds()
        return self._last.coords if age <= maximum_age else None

    async def get_current_position(self, options: PositionOptions) -> Optional[Coordinates]:
        if self._source is None:
            log.info("no location capability on this host")
            return None

        cached = self._cached(options.maximum_age)
        if cached is not None:
            return cached

        try:
            coords = await asyncio.wait_for(
                self._source.read_position(enable_high_accuracy=options.enable_high_accuracy),
                timeout=options.timeout,
            )
        except asyncio.TimeoutError:
            log.info("location request timed out after %.1fs", options.timeout)
            return None
        except GeolocationError as e:
            log.info("location unavailable: %s", e)
            return None

        self._last = _Reading(coords=coords, taken_at=self._clock())
        return coords
