from __future__ import annotations

import base64
import binascii

import cv2
import numpy as np

from ..core.constants import JPEG_QUALITY
from ..core.exceptions import CameraAccessError, ValidationError

DATA_URL_PREFIX = "data:image/jpeg;base64,"


def encode_snapshot(frame: np.ndarray, *, quality: int = JPEG_QUALITY) -> str:
    """Mirror a BGR frame horizontally (to match the preview) and encode it as a JPEG data URL."""
    mirrored = cv2.flip(frame, 1)
    ok, buffer = cv2.imencode(".jpg", mirrored, [int(cv2.IMWRITE_JPEG_QUALITY), int(quality)])
    if not ok:
        raise CameraAccessError("Failed to encode captured frame")
    return DATA_URL_PREFIX + base64.b64encode(buffer.tobytes()).decode("ascii")


def decode_data_url(image: str) -> np.ndarray:
    """Decode an uploaded base64 image (data URL or bare base64) into a BGR frame."""
    if not image:
        raise ValidationError("No image captured")

    payload = image.split(",", 1)[1] if "," in image else image
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("Invalid image format")

    img = cv2.imdecode(np.frombuffer(raw, np.uint8), cv2.IMREAD_COLOR)
    if img is None:
        raise ValidationError("Invalid image format")
    return img
