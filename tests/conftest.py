from __future__ import annotations

import cv2
import numpy as np
import pytest


@pytest.fixture()
def png_bytes() -> bytes:
    image = np.zeros((4, 6, 3), dtype=np.uint8)
    image[:, :, 2] = 255
    ok, encoded = cv2.imencode(".png", image)
    assert ok
    return encoded.tobytes()
