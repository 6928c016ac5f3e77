"""Concrete HTTP transport using httpx (injected where HttpTransport is needed)."""
from __future__ import annotations

import httpx

from netlayer.app.ports.http_transport import (
    HttpTransport,
    HttpTransportError,
    OutgoingRequest,
    TransportResponse,
)


class _HttpxResponseAdapter:
    """Adapts a fully-read httpx.Response to the TransportResponse protocol."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int | None:
        return self._response.status_code

    @property
    def content(self) -> bytes | None:
        return self._response.content

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._response.headers)

    @property
    def url(self) -> str:
        return str(self._response.url)


class HttpxTransport(HttpTransport):
    """HttpTransport implementation opening a fresh httpx.AsyncClient per request.

    No client outlives a call and no timeout is set here, so httpx defaults apply.
    ``transport`` is passed through to the client (e.g. httpx.MockTransport).
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport

    async def send(self, request: OutgoingRequest) -> TransportResponse:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(
                    request.method,
                    request.url,
                    headers=dict(request.headers),
                    content=request.body,
                )
                return _HttpxResponseAdapter(response)
        except httpx.HTTPError as exc:
            raise HttpTransportError(f"{request.method} {request.url} failed: {exc}") from exc
