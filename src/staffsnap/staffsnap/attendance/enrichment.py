from __future__ import annotations

import asyncio
import dataclasses
from typing import Optional

from ..common.log import get_logger
from .geolocation import GeolocationProvider, PositionOptions
from .greeting import GreetingProvider, fallback_greeting
from .model import AttendanceEvent, Coordinates

log = get_logger("enrichment")


class RecordEnricher:
    """Runs the greeting and location lookups concurrently and merges both.

    Both lookups must settle before the merge; their completion order does
    not matter. A provider that breaks its never-raise contract is mapped to
    the same default the provider would have produced.
    """

    def __init__(self, greetings: GreetingProvider):
        self._greetings = greetings

    async def enrich(
        self,
        event: AttendanceEvent,
        image: str,
        *,
        geolocation: GeolocationProvider,
        options: PositionOptions,
    ) -> AttendanceEvent:
        greeting, location = await asyncio.gather(
            self._greetings.generate(image, event.staff_name, event.kind),
            geolocation.get_current_position(options),
            return_exceptions=True,
        )

        if isinstance(greeting, BaseException):
            log.warning("greeting provider raised for %s", event.event_id, exc_info=greeting)
            greeting = fallback_greeting(event.staff_name, event.kind)
        if isinstance(location, BaseException):
            log.warning("geolocation provider raised for %s", event.event_id, exc_info=location)
            location = None

        return merge_enrichment(event, greeting=greeting, location=location)


def merge_enrichment(event: AttendanceEvent, *, greeting: str, location: Optional[Coordinates]) -> AttendanceEvent:
    return dataclasses.replace(event, greeting=greeting, location=location, pending=False)
