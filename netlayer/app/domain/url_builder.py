"""URL composition from Router components."""
from __future__ import annotations

import re

import httpx

from netlayer.app.ports.router import Router

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
# RFC 3986 reg-name (unreserved / pct-encoded / sub-delims) or a bracketed IP literal.
_HOST_RE = re.compile(r"^(\[[0-9A-Fa-f:.]+\]|[A-Za-z0-9\-._~%!$&'()*+,;=]+)$")


def compose_url(router: Router) -> httpx.URL | None:
    """Build the target URL, or None when the components do not form a valid URL."""
    scheme = router.scheme or ""
    host = router.host or ""
    path = router.path or ""
    if not _SCHEME_RE.match(scheme) or not _HOST_RE.match(host):
        return None
    if path and not path.startswith("/"):
        return None

    params = [(name, value if value is not None else "") for name, value in router.parameters or ()]
    try:
        url = httpx.URL(scheme=scheme.lower(), host=host, path=path)
        if params:
            url = url.copy_with(params=params)
    except (httpx.InvalidURL, TypeError, ValueError):
        return None
    return url


def parse_absolute_url(raw: str) -> httpx.URL | None:
    """Parse a caller-supplied URL string; None unless it has a scheme and host."""
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError):
        return None
    if not url.scheme or not url.host:
        return None
    return url
