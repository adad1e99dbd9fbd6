"""In-process cache adapters for the published-content listings."""

import threading
import time
from collections.abc import Callable
from typing import Any

import cachetools
import structlog

logger = structlog.get_logger(__name__)


class MemoryCache:
    """
    TTL-bounded, size-bounded key/value cache shared by the process.

    Entries expire after ``ttl`` seconds; once ``maxsize`` entries are held
    the least recently used one is evicted. Sync FastAPI routes run on a
    thread pool, so access is serialized with a lock.
    """

    def __init__(
        self, maxsize: int, ttl: float, timer: Callable[[], float] = time.monotonic
    ) -> None:
        self._cache: cachetools.TTLCache[str, Any] = cachetools.TTLCache(
            maxsize=maxsize, ttl=ttl, timer=timer
        )
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:  # noqa: ANN401
        with self._lock:
            return self._cache.get(key)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        with self._lock:
            self._cache[key] = value

    def delete(self, *keys: str) -> None:
        with self._lock:
            for key in keys:
                self._cache.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
        logger.debug("cleared_cache")

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)


class NullCache:
    """Cache that never stores anything; used when caching is disabled."""

    def get(self, key: str) -> Any | None:  # noqa: ANN401, ARG002
        return None

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        pass

    def delete(self, *keys: str) -> None:
        pass

    def clear(self) -> None:
        pass
