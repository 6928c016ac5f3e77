"""Image decoding with OpenCV over a numpy buffer."""
from __future__ import annotations

import cv2
import numpy as np

from netlayer.app.ports.image_decoder import ImageDecoder


class OpenCvImageDecoder(ImageDecoder):
    """Decodes standard encodings (PNG, JPEG, ...) to a BGR ndarray; None if invalid."""

    def __init__(self, flags: int = cv2.IMREAD_COLOR) -> None:
        self._flags = flags

    def decode(self, data: bytes) -> np.ndarray | None:
        if not data:
            return None
        buffer = np.frombuffer(data, dtype=np.uint8)
        try:
            image = cv2.imdecode(buffer, self._flags)
        except cv2.error:
            return None
        if image is None or image.size == 0:
            return None
        return image
