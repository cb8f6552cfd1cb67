"""Capture session: device acquisition, countdown and automatic snapshot.

IDLE -> ACTIVE (countdown 3, 2, 1, 0) -> CAPTURING -> emits image -> IDLE.
A refused device lands in DENIED, from which ``retry()`` re-runs the
acquisition step. Exactly one timer (countdown or capture delay) is pending
at a time and it is cancelled on every exit path.
"""
from __future__ import annotations

import asyncio
from typing import Callable, Optional

import numpy as np

from ..common.log import get_logger
from ..core.constants import (
    CAMERA_HEIGHT,
    CAMERA_WIDTH,
    CAPTURE_DELAY_SECONDS,
    COUNTDOWN_SECONDS,
    JPEG_QUALITY,
    TICK_SECONDS,
)
from ..core.enums import CameraStatus
from ..core.exceptions import CameraAccessError
from .device import CaptureDevice, CaptureStream
from .snapshot import encode_snapshot

log = get_logger("capture.session")

StatusListener = Callable[[CameraStatus, Optional[int]], None]


class CaptureSession:
    def __init__(
        self,
        device: CaptureDevice,
        *,
        on_capture: Callable[[str], None],
        on_change: StatusListener | None = None,
        countdown_from: int = COUNTDOWN_SECONDS,
        tick_seconds: float = TICK_SECONDS,
        capture_delay: float = CAPTURE_DELAY_SECONDS,
        width: int = CAMERA_WIDTH,
        height: int = CAMERA_HEIGHT,
        jpeg_quality: int = JPEG_QUALITY,
        encoder: Callable[..., str] = encode_snapshot,
    ):
        self._device = device
        self._on_capture = on_capture
        self._on_change = on_change
        self._countdown_from = int(countdown_from)
        self._tick_seconds = float(tick_seconds)
        self._capture_delay = float(capture_delay)
        self._width = int(width)
        self._height = int(height)
        self._jpeg_quality = int(jpeg_quality)
        self._encode = encoder

        self.status = CameraStatus.IDLE
        self.countdown: Optional[int] = None
        self._stream: Optional[CaptureStream] = None
        self._timer: Optional[asyncio.Task] = None
        self._open = False
        # bumped on open/retry/close; an acquisition from an older generation is discarded
        self._generation = 0
        self.last_error: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self._open

    async def __aenter__(self) -> "CaptureSession":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    async def open(self) -> None:
        if self._open:
            return
        self._open = True
        self._generation += 1
        await self._acquire(self._generation)

    async def retry(self) -> None:
        """Re-attempt acquisition after a refusal; countdown state is kept."""
        if not self._open or self.status != CameraStatus.DENIED:
            return
        self._generation += 1
        await self._acquire(self._generation)

    def trigger_capture(self) -> bool:
        """Manual capture; only honored while ACTIVE."""
        if self.status != CameraStatus.ACTIVE:
            return False
        self._begin_capture()
        return True

    def close(self) -> None:
        self._open = False
        self._generation += 1
        self._cancel_timer()
        self._release_stream()
        self.countdown = None
        self._set_status(CameraStatus.IDLE)

    def _superseded(self, generation: int) -> bool:
        return not self._open or generation != self._generation

    async def _acquire(self, generation: int) -> None:
        try:
            stream = await asyncio.to_thread(self._device.acquire, width=self._width, height=self._height)
        except CameraAccessError as e:
            log.warning("camera acquisition failed: %s", e)
            if not self._superseded(generation):
                self.last_error = str(e)
                self._set_status(CameraStatus.DENIED)
            return

        first_frame = await asyncio.to_thread(stream.read)
        if self._superseded(generation):
            # closed or re-opened while the device was opening
            stream.release()
            return
        if first_frame is None:
            stream.release()
            log.warning("camera opened but delivered no frame")
            self.last_error = "Camera delivered no image"
            self._set_status(CameraStatus.DENIED)
            return

        self._cancel_timer()
        self._release_stream()
        self._stream = stream
        self._activate()

    def _activate(self) -> None:
        self._set_status(CameraStatus.ACTIVE)
        if self.countdown is None:
            self.countdown = self._countdown_from
            self._notify()
        self._timer = asyncio.get_running_loop().create_task(self._run_countdown())

    async def _run_countdown(self) -> None:
        while self.countdown is not None and self.countdown > 0:
            await asyncio.sleep(self._tick_seconds)
            self.countdown -= 1
            self._notify()

        self._timer = None
        if self.status == CameraStatus.ACTIVE:
            self._begin_capture()

    def _begin_capture(self) -> None:
        """Grab and encode the frame shown at the moment of capture.

        The read stays on the loop thread: the stream is released from this
        thread too, so a frame grab never overlaps ``release()``.
        """
        self._cancel_timer()
        self._set_status(CameraStatus.CAPTURING)

        frame: Optional[np.ndarray] = self._stream.read() if self._stream else None
        if frame is None:
            log.warning("no frame available at capture time")
            self._release_stream()
            self.countdown = None
            self._set_status(CameraStatus.DENIED)
            return

        image = self._encode(frame, quality=self._jpeg_quality)
        self._timer = asyncio.get_running_loop().create_task(self._emit_after_delay(image))

    async def _emit_after_delay(self, image: str) -> None:
        await asyncio.sleep(self._capture_delay)
        self._timer = None
        try:
            self._on_capture(image)
        except Exception:
            log.exception("capture handler failed")
        finally:
            self.close()

    def _cancel_timer(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None or timer.done():
            return
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        if timer is not current:
            timer.cancel()

    def _release_stream(self) -> None:
        stream, self._stream = self._stream, None
        if stream is not None:
            stream.release()

    def _set_status(self, status: CameraStatus) -> None:
        if status == self.status:
            return
        log.debug("capture session %s -> %s", self.status.value, status.value)
        self.status = status
        self._notify()

    def _notify(self) -> None:
        if self._on_change:
            self._on_change(self.status, self.countdown)


async def capture_photo(device: CaptureDevice, *, timeout: float = 30.0, **session_options) -> str:
    """Run one capture session to completion and return the encoded image.

    Raises CameraAccessError when the device is refused or no image arrives
    within ``timeout`` seconds. The device is released on every path.
    """
    loop = asyncio.get_running_loop()
    result: asyncio.Future[str] = loop.create_future()

    def _deliver(image: str) -> None:
        if not result.done():
            result.set_result(image)

    def _watch(status: CameraStatus, countdown: Optional[int]) -> None:
        if status == CameraStatus.DENIED and not result.done():
            result.set_exception(CameraAccessError(session.last_error or "Camera access denied"))

    session = CaptureSession(device, on_capture=_deliver, on_change=_watch, **session_options)
    async with session:
        try:
            return await asyncio.wait_for(result, timeout)
        except asyncio.TimeoutError:
            raise CameraAccessError("Timed out waiting for the camera")
