"""
TTL response caches owned by the HTTP layer.

Domain resolvers never cache; routers decide what to keep and for how long.
"""

import threading
import time
from typing import Any, Callable, Hashable, Optional

from cachetools import TTLCache


class ResponseCache:
    """Thread-safe wrapper around cachetools.TTLCache.

    Sync endpoints run in FastAPI's thread pool, and TTLCache itself is not
    safe for concurrent mutation.
    """

    def __init__(
        self,
        maxsize: int,
        ttl: float,
        timer: Callable[[], float] = time.monotonic,
    ):
        self._cache: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            return self._cache.get(key)

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._cache[key] = value

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
