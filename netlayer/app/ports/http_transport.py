"""HTTP transport port: contract for sending one fully-formed request.

Application code depends on this port; infrastructure (e.g. httpx)
implements it. Keeps the executor free of infrastructure imports.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol, runtime_checkable


class HttpTransportError(Exception):
    """Low-level transport failure (DNS, connection reset, no connectivity).

    The original library error is chained as ``__cause__``.
    """


@dataclass(frozen=True)
class OutgoingRequest:
    """Request as it goes on the wire."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None


@runtime_checkable
class TransportResponse(Protocol):
    """Minimal read-only view of what the transport handed back.

    ``status_code`` is None when the response is not an HTTP response;
    ``content`` is None when no body bytes were returned at all.
    """

    @property
    def status_code(self) -> int | None: ...

    @property
    def content(self) -> bytes | None: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def url(self) -> str: ...


@runtime_checkable
class HttpTransport(Protocol):
    """Port: send requests. Implementations live in infrastructure."""

    async def send(self, request: OutgoingRequest) -> TransportResponse:
        """Send one request; raise HttpTransportError on transport failure."""
        ...
