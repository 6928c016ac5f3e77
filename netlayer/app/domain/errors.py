"""Network error taxonomy.

Every failure of a request call is one of these, except body decode errors on
2xx responses, which are delivered unchanged so callers can tell them apart.
Each error exposes a display description, an integer code and a user-info
mapping for a generic error-presentation layer.
"""
from __future__ import annotations

from typing import Any

from netlayer.app.constants import DEFAULT_FALLBACK_ERROR_MESSAGE, ERROR_DOMAIN


class NetworkError(Exception):
    """Base for request failures produced by the executor."""

    error_domain: str = ERROR_DOMAIN
    fallback_description: str = DEFAULT_FALLBACK_ERROR_MESSAGE

    @property
    def description(self) -> str:
        return self.fallback_description

    @property
    def error_code(self) -> int:
        return 0

    @property
    def user_info(self) -> dict[str, Any]:
        return {"message": self.description}

    def __str__(self) -> str:
        return self.description


class InvalidURLError(NetworkError):
    """Router components did not compose into a valid URL."""


class NoResponseDataError(NetworkError):
    """Transport reported no error but returned no body bytes."""


class InvalidResponseShapeError(NetworkError):
    """Transport returned something that is not an HTTP response."""


class TransportFailureError(NetworkError):
    """Low-level transport failure; wraps the underlying error."""

    def __init__(self, underlying: BaseException) -> None:
        super().__init__(underlying)
        self.underlying = underlying

    def __repr__(self) -> str:
        return f"TransportFailureError(underlying={self.underlying!r})"


class StatusCodeError(NetworkError):
    """HTTP response whose status lies outside 200-299.

    ``message`` and ``user_message`` are best-effort extractions from the
    error body; they may be empty or None.
    """

    def __init__(self, code: int, message: str = "", user_message: str | None = None) -> None:
        super().__init__(code, message, user_message)
        self.code = code
        self.message = message
        self.user_message = user_message

    @property
    def description(self) -> str:
        return self.message

    @property
    def error_code(self) -> int:
        return self.code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusCodeError):
            return NotImplemented
        return (self.code, self.message, self.user_message) == (
            other.code,
            other.message,
            other.user_message,
        )

    def __hash__(self) -> int:
        return hash((self.code, self.message, self.user_message))

    def __repr__(self) -> str:
        return (
            f"StatusCodeError(code={self.code}, message={self.message!r}, "
            f"user_message={self.user_message!r})"
        )
