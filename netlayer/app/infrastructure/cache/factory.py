"""Response cache factory and the process-wide shared instance."""
from __future__ import annotations

import threading

from netlayer.app.config.settings import Settings
from netlayer.app.infrastructure.cache.in_memory_cache import InMemoryResponseCache
from netlayer.app.ports.response_cache import ResponseCache

_shared_cache: ResponseCache | None = None
_shared_lock = threading.Lock()


def create_response_cache(settings: Settings) -> ResponseCache:
    return InMemoryResponseCache(max_entries=settings.image_cache_max_entries)


def shared_response_cache(settings: Settings | None = None) -> ResponseCache:
    """Process-wide cache, created on first use; later ``settings`` are ignored."""
    global _shared_cache
    with _shared_lock:
        if _shared_cache is None:
            _shared_cache = create_response_cache(settings or Settings())
        return _shared_cache
