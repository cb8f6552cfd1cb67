"""Run one capture session on the configured webcam and save the snapshot.

Usage: python scripts/camera_check.py [output.jpg]
"""
from __future__ import annotations

import asyncio
import base64
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.staffsnap.staffsnap.capture.device import OpenCVCaptureDevice
from src.staffsnap.staffsnap.capture.session import capture_photo
from src.staffsnap.staffsnap.capture.snapshot import DATA_URL_PREFIX
from src.staffsnap.staffsnap.core.exceptions import CameraAccessError


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    out_path = Path(sys.argv[1] if len(sys.argv) > 1 else "camera_check.jpg")

    device = OpenCVCaptureDevice(settings.CAMERA_SOURCE)
    print(f"Opening camera {settings.CAMERA_SOURCE!r}, capturing in {settings.COUNTDOWN_SECONDS}s...")
    try:
        image = asyncio.run(
            capture_photo(
                device,
                countdown_from=settings.COUNTDOWN_SECONDS,
                capture_delay=settings.CAPTURE_DELAY_SECONDS,
                width=settings.CAMERA_WIDTH,
                height=settings.CAMERA_HEIGHT,
            )
        )
    except CameraAccessError as e:
        print(f"Camera check failed: {e}")
        raise SystemExit(1)

    out_path.write_bytes(base64.b64decode(image[len(DATA_URL_PREFIX):]))
    print(f"Saved {out_path}")


if __name__ == "__main__":
    main()
