"""Process-local response cache (LRU, thread-safe)."""
from __future__ import annotations

import threading
from collections import OrderedDict

from loguru import logger

from netlayer.app.ports.response_cache import CachedResponse, CacheKey, ResponseCache


class InMemoryResponseCache(ResponseCache):
    """Bounded LRU keyed by CacheKey. Safe to share across threads and event loops.

    Defines __len__, so an empty cache is falsy: test optional instances with
    ``is None``, never by truthiness.
    """

    def __init__(self, max_entries: int = 256) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._max_entries = int(max_entries)
        self._entries: OrderedDict[CacheKey, CachedResponse] = OrderedDict()
        self._lock = threading.Lock()

    def lookup(self, key: CacheKey) -> CachedResponse | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                self._entries.move_to_end(key)
            return entry

    def store(self, key: CacheKey, response: CachedResponse) -> None:
        with self._lock:
            self._entries[key] = response
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("response cache evicted {}", evicted.url)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
