"""HTTP transport factory: builds HttpTransport from settings (no provider logic in composition)."""
from __future__ import annotations

from netlayer.app.config.settings import Settings
from netlayer.app.infrastructure.http.httpx_transport import HttpxTransport
from netlayer.app.ports.http_transport import HttpTransport


def create_http_transport(settings: Settings) -> HttpTransport:
    """Build the transport. Sessions are per request, so nothing here needs closing."""
    return HttpxTransport()
