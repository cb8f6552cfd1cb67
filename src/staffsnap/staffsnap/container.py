from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.enrichment import RecordEnricher
from .attendance.geolocation import DeviceGeolocation, FixedPositionSource
from .attendance.greeting import FallbackGreetingProvider, GeminiGreetingProvider, GreetingProvider
from .attendance.service import AttendanceService
from .capture.device import CaptureDevice, OpenCVCaptureDevice
from .core.enums import LocationAccuracy
from .reports.service import ReportService
from .state.app_state import AppState, StateStore
from .state.memory_repositories import InMemoryAttendanceRepository, InMemoryUserRepository
from .state.seed import demo_state
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class CaptureSettings:
    countdown_from: int
    capture_delay: float
    width: int
    height: int


@dataclass(frozen=True)
class Container:
    store: StateStore

    users_repo: InMemoryUserRepository
    attendance_repo: InMemoryAttendanceRepository

    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    report_service: ReportService

    camera: CaptureDevice
    capture_settings: CaptureSettings
    kiosk_geolocation: DeviceGeolocation
    default_accuracy: LocationAccuracy


def _greeting_provider(settings: dict) -> GreetingProvider:
    api_key = str(settings.get("GEMINI_API_KEY") or "")
    if not api_key:
        return FallbackGreetingProvider()
    return GeminiGreetingProvider(api_key, model=str(settings.get("GREETING_MODEL", "gemini-2.5-flash")))


def _kiosk_geolocation(settings: dict) -> DeviceGeolocation:
    lat = settings.get("KIOSK_LATITUDE")
    lon = settings.get("KIOSK_LONGITUDE")
    if lat in (None, "") or lon in (None, ""):
        return DeviceGeolocation(None)
    return DeviceGeolocation(FixedPositionSource(float(lat), float(lon)))


def build_container(
    *,
    settings: dict,
    camera: Optional[CaptureDevice] = None,
    greetings: Optional[GreetingProvider] = None,
) -> Container:
    initial = demo_state() if settings.get("SEED_DEMO_DATA") else AppState()
    store = StateStore(initial)

    users_repo = InMemoryUserRepository(store)
    attendance_repo = InMemoryAttendanceRepository(store)

    enricher = RecordEnricher(greetings or _greeting_provider(settings))

    return Container(
        store=store,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        attendance_service=AttendanceService(attendance_repo, users_repo, enricher),
        report_service=ReportService(attendance_repo, users_repo),
        camera=camera or OpenCVCaptureDevice(settings.get("CAMERA_SOURCE", 0)),
        capture_settings=CaptureSettings(
            countdown_from=int(settings.get("COUNTDOWN_SECONDS", 3)),
            capture_delay=float(settings.get("CAPTURE_DELAY_SECONDS", 0.3)),
            width=int(settings.get("CAMERA_WIDTH", 1280)),
            height=int(settings.get("CAMERA_HEIGHT", 720)),
        ),
        kiosk_geolocation=_kiosk_geolocation(settings),
        default_accuracy=LocationAccuracy(settings.get("DEFAULT_LOCATION_ACCURACY", "high")),
    )
