"""Response cache port: lookup-by-request and store-by-request."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class CacheKey:
    """Fully-formed request identity: method, URL and headers."""

    method: str
    url: str
    headers: tuple[tuple[str, str], ...] = ()

    @staticmethod
    def for_request(method: str, url: str, headers: Mapping[str, str] | None = None) -> "CacheKey":
        pairs = tuple(sorted((k.lower(), v) for k, v in (headers or {}).items()))
        return CacheKey(method=method.upper(), url=url, headers=pairs)


@dataclass(frozen=True)
class CachedResponse:
    """Response metadata plus raw body bytes."""

    status_code: int | None
    url: str
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class ResponseCache(Protocol):
    """Port: shared response store. Implementations must be safe to call from any thread."""

    def lookup(self, key: CacheKey) -> CachedResponse | None: ...

    def store(self, key: CacheKey, response: CachedResponse) -> None: ...
