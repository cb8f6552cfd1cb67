from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .attendance.greeting import GreetingProvider
from .capture.device import CaptureDevice
from .common.log import attach_console_handler, get_logger
from .container import build_container
from .reports.controller import register as register_reports
from .users.controller import register as register_users

log = get_logger("app")


def load_settings(overrides: Optional[dict] = None) -> tuple[str, dict]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {k: getattr(module, k) for k in dir(module) if k.isupper()}
    settings.update(overrides or {})
    return settings_module, settings


def create_app(
    *,
    overrides: Optional[dict] = None,
    camera: Optional[CaptureDevice] = None,
    greetings: Optional[GreetingProvider] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module, settings = load_settings(overrides)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    if not app.config["TESTING"]:
        attach_console_handler(str(settings.get("LOG_LEVEL", "INFO")))
    log.info(
        "settings=%s seed=%s greeting=%s camera=%s",
        settings_module,
        bool(settings.get("SEED_DEMO_DATA")),
        "gemini" if settings.get("GEMINI_API_KEY") else "fallback",
        settings.get("CAMERA_SOURCE"),
    )

    container = build_container(settings=settings, camera=camera, greetings=greetings)
    app.extensions["staffsnap"] = container

    register_users(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
