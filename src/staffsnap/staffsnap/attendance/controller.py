from __future__ import annotations

import asyncio

from flask import Flask, jsonify, request, session

from ..capture.session import capture_photo
from ..capture.snapshot import decode_data_url
from ..common.log import get_logger
from ..common.web import fail, staff_required
from ..container import Container
from ..core.enums import AttendanceKind, LocationAccuracy
from ..core.exceptions import CameraAccessError, ValidationError
from .geolocation import POSITION_PROFILES, ReportedPosition, options_for

log = get_logger("attendance.controller")


def register(app: Flask, container: Container) -> None:
    def _accuracy() -> LocationAccuracy:
        try:
            return LocationAccuracy(session.get("location_accuracy", container.default_accuracy.value))
        except ValueError:
            return container.default_accuracy

    def _kind(slug: str) -> AttendanceKind:
        try:
            return AttendanceKind.from_slug(slug)
        except ValueError:
            raise ValidationError(f"Unknown action: {slug}")

    @app.route("/api/settings/location", methods=["GET"], endpoint="location_settings")
    @staff_required
    def location_settings():
        accuracy = _accuracy()
        return jsonify(
            {
                "success": True,
                "accuracy": accuracy.value,
                "options": options_for(accuracy).to_dict(),
                "profiles": {k.value: v.to_dict() for k, v in POSITION_PROFILES.items()},
            }
        ), 200

    @app.route("/api/settings/location", methods=["POST"], endpoint="set_location_settings")
    @staff_required
    def set_location_settings():
        data = request.get_json(silent=True) or {}
        try:
            accuracy = LocationAccuracy(str(data.get("accuracy", "")).lower())
        except ValueError:
            return fail("Accuracy must be one of: high, medium, low", 400)

        session["location_accuracy"] = accuracy.value
        return jsonify({"success": True, "accuracy": accuracy.value, "options": options_for(accuracy).to_dict()}), 200

    @app.route("/api/attendance/<kind>", methods=["POST"], endpoint="submit_scan")
    @staff_required
    def submit_scan(kind: str):
        """Selfie captured by the browser; position (if any) reported alongside it."""
        data = request.get_json(silent=True) or {}
        try:
            action = _kind(kind)
            image = data.get("image", "")
            decode_data_url(image)

            record = asyncio.run(
                container.attendance_service.record_scan(
                    staff_name=session["name"],
                    kind=action,
                    image=image,
                    geolocation=ReportedPosition(data.get("latitude"), data.get("longitude")),
                    options=options_for(_accuracy()),
                )
            )
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            log.exception("scan submission failed")
            return fail("System error while recording attendance", 500)

        return jsonify({"success": True, "action": action.label, "record": record.to_dict()}), 201

    @app.route("/api/attendance/<kind>/capture", methods=["POST"], endpoint="kiosk_scan")
    @staff_required
    def kiosk_scan(kind: str):
        """Run a capture session on the host webcam, then record the scan."""
        staff_name = session["name"]
        accuracy = _accuracy()
        cs = container.capture_settings

        async def _scan(action: AttendanceKind):
            image = await capture_photo(
                container.camera,
                countdown_from=cs.countdown_from,
                capture_delay=cs.capture_delay,
                width=cs.width,
                height=cs.height,
            )
            return await container.attendance_service.record_scan(
                staff_name=staff_name,
                kind=action,
                image=image,
                geolocation=container.kiosk_geolocation,
                options=options_for(accuracy),
            )

        try:
            record = asyncio.run(_scan(_kind(kind)))
        except ValidationError as e:
            return fail(str(e), 400)
        except CameraAccessError as e:
            return jsonify({"success": False, "message": str(e), "retry": True}), 409
        except Exception:
            log.exception("kiosk capture failed")
            return fail("System error while recording attendance", 500)

        return jsonify({"success": True, "action": record.kind.label, "record": record.to_dict()}), 201

    @app.route("/api/attendance/mine", methods=["GET"], endpoint="my_records")
    @staff_required
    def my_records():
        rows = container.attendance_service.history_for(session["name"])
        return jsonify({"success": True, "records": [r.to_dict() for r in rows]}), 200
