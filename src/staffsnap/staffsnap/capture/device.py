from __future__ import annotations

import threading
from typing import Optional, Protocol

import cv2
import numpy as np

from ..common.log import get_logger
from ..core.exceptions import CameraAccessError

log = get_logger("capture.device")


class CaptureStream(Protocol):
    def read(self) -> Optional[np.ndarray]:
        """Latest frame, or None when the device stopped delivering."""

        raise NotImplementedError

    def release(self) -> None:
        raise NotImplementedError


class CaptureDevice(Protocol):
    def acquire(self, *, width: int, height: int) -> CaptureStream:
        """Open the device with a preferred resolution; raises CameraAccessError."""

        raise NotImplementedError


def parse_source(source: str | int) -> str | int:
    """Webcam indices arrive as strings from the environment."""
    if isinstance(source, int):
        return source
    s = str(source).strip()
    return int(s) if s.isdigit() else s


class OpenCVStream:
    def __init__(self, cap: cv2.VideoCapture, device: "OpenCVCaptureDevice"):
        self._cap = cap
        self._device = device
        self._released = False

    def read(self) -> Optional[np.ndarray]:
        if self._released:
            return None
        ret, frame = self._cap.read()
        if not ret or frame is None:
            return None
        return frame

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._cap.release()
        self._device._mark_released()


class OpenCVCaptureDevice:
    """Local webcam or stream URL opened through OpenCV.

    The device is held exclusively: a second acquire while a stream is open
    fails instead of sharing the camera.
    """

    def __init__(self, source: str | int = 0):
        self._source = parse_source(source)
        self._lock = threading.Lock()
        self._held = False

    def acquire(self, *, width: int, height: int) -> OpenCVStream:
        with self._lock:
            if self._held:
                raise CameraAccessError("Camera is already in use")

            cap = cv2.VideoCapture(self._source)
            cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
            cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
            if not cap.isOpened():
                cap.release()
                log.warning("failed to open camera source %r", self._source)
                raise CameraAccessError("Camera access denied")

            self._held = True
            return OpenCVStream(cap, self)

    def _mark_released(self) -> None:
        with self._lock:
            self._held = False
