"""Image decoder port: bytes in, decoded image (or None) out."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ImageDecoder(Protocol):
    def decode(self, data: bytes) -> Any | None:
        """Return the decoded image, or None when ``data`` is not a valid image."""
        ...
