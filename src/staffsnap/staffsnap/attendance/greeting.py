"""Greeting generation for attendance scans.

Providers never raise to their caller: any failure is mapped to a fixed
per-kind fallback string.
"""
from __future__ import annotations

import base64
import re
from typing import Protocol

from google import genai
from google.genai import types

from ..common.log import get_logger
from ..core.constants import (
    CLOCK_IN_FALLBACK,
    CLOCK_OUT_FALLBACK,
    DEFAULT_GREETING_MODEL,
    EMPTY_REPLY_GREETING,
)
from ..core.enums import AttendanceKind

log = get_logger("greeting")

_DATA_URL_PREFIX = re.compile(r"^data:image/(png|jpg|jpeg);base64,")


def fallback_greeting(staff_name: str, kind: AttendanceKind) -> str:
    template = CLOCK_IN_FALLBACK if kind == AttendanceKind.CLOCK_IN else CLOCK_OUT_FALLBACK
    return template.format(name=staff_name)


def build_prompt(staff_name: str, kind: AttendanceKind) -> str:
    if kind == AttendanceKind.CLOCK_IN:
        return (
            f"The user {staff_name} is clocking in for work. Analyze their facial expression in the image "
            "and generate a short, warm, professional, and energetic 1-sentence welcome message. "
            "If they look happy, mention it. If they look tired, be encouraging."
        )
    return (
        f"The user {staff_name} is clocking out. Generate a warm 1-sentence goodbye message "
        "thanking them for their hard work based on the image."
    )


def strip_data_url(image: str) -> str:
    return _DATA_URL_PREFIX.sub("", image)


class GreetingProvider(Protocol):
    async def generate(self, image: str, staff_name: str, kind: AttendanceKind) -> str:
        raise NotImplementedError


class FallbackGreetingProvider:
    """Used when no model is configured: always the templated greeting."""

    async def generate(self, image: str, staff_name: str, kind: AttendanceKind) -> str:
        return fallback_greeting(staff_name, kind)


class GeminiGreetingProvider:
    """Asks a Gemini model to greet the person in the captured selfie."""

    def __init__(self, api_key: str, *, model: str = DEFAULT_GREETING_MODEL):
        self._api_key = api_key
        self._model = model

    def _client(self) -> genai.Client:
        return genai.Client(api_key=self._api_key)

    async def generate(self, image: str, staff_name: str, kind: AttendanceKind) -> str:
        try:
            image_bytes = base64.b64decode(strip_data_url(image))
            response = await self._client().aio.models.generate_content(
                model=self._model,
                contents=[
                    types.Part.from_bytes(data=image_bytes, mime_type="image/jpeg"),
                    build_prompt(staff_name, kind),
                ],
            )
            return response.text or EMPTY_REPLY_GREETING.format(name=staff_name)
        except Exception:
            log.warning("greeting generation failed for %r, using fallback", staff_name, exc_info=True)
            return fallback_greeting(staff_name, kind)
