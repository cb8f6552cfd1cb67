from __future__ import annotations

import asyncio
from types import SimpleNamespace

from src.staffsnap.staffsnap.attendance.greeting import (
    FallbackGreetingProvider,
    GeminiGreetingProvider,
    build_prompt,
    fallback_greeting,
    strip_data_url,
)
from src.staffsnap.staffsnap.core.enums import AttendanceKind


def test_fallback_greetings_per_kind():
    assert fallback_greeting("Alex", AttendanceKind.CLOCK_IN) == "Welcome, Alex. Have a great day!"
    assert fallback_greeting("Alex", AttendanceKind.CLOCK_OUT) == "Goodbye, Alex. See you next time!"


def test_strip_data_url_prefix():
    assert strip_data_url("data:image/jpeg;base64,QUJD") == "QUJD"
    assert strip_data_url("data:image/png;base64,QUJD") == "QUJD"
    assert strip_data_url("QUJD") == "QUJD"


def test_prompt_mentions_name_and_kind():
    assert "clocking in" in build_prompt("Alex", AttendanceKind.CLOCK_IN)
    assert "clocking out" in build_prompt("Alex", AttendanceKind.CLOCK_OUT)
    assert "Alex" in build_prompt("Alex", AttendanceKind.CLOCK_OUT)


def test_fallback_provider_uses_template():
    greeting = asyncio.run(FallbackGreetingProvider().generate("", "Alex", AttendanceKind.CLOCK_OUT))

    assert greeting == "Goodbye, Alex. See you next time!"


def _fake_client(reply=None, error=None):
    async def generate_content(*, model, contents):
        if error:
            raise error
        return SimpleNamespace(text=reply)

    return SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))


def test_gemini_provider_returns_model_text(monkeypatch):
    provider = GeminiGreetingProvider("key")
    monkeypatch.setattr(provider, "_client", lambda: _fake_client(reply="Great smile today, Alex!"))

    greeting = asyncio.run(provider.generate("data:image/jpeg;base64,QUJD", "Alex", AttendanceKind.CLOCK_IN))

    assert greeting == "Great smile today, Alex!"


def test_gemini_provider_empty_reply_uses_welcome_back(monkeypatch):
    provider = GeminiGreetingProvider("key")
    monkeypatch.setattr(provider, "_client", lambda: _fake_client(reply=""))

    greeting = asyncio.run(provider.generate("QUJD", "Alex", AttendanceKind.CLOCK_OUT))

    assert greeting == "Welcome back, Alex!"


def test_gemini_provider_failure_never_raises(monkeypatch):
    provider = GeminiGreetingProvider("key")
    monkeypatch.setattr(provider, "_client", lambda: _fake_client(error=RuntimeError("quota exceeded")))

    greeting = asyncio.run(provider.generate("QUJD", "Alex", AttendanceKind.CLOCK_IN))

    assert greeting == "Welcome, Alex. Have a great day!"
