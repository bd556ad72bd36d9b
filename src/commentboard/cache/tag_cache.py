"""Tag-keyed read cache with explicit invalidation.

The cache exists for correctness, not speed: an entry lives until a write
invalidates its tag or the cache is closed. There is no size bound and no
expiry.
"""

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, TypeVar

from commentboard.lib.exceptions import CacheException
from commentboard.utils.logger import setup_logger

T = TypeVar("T")

cache_logger = setup_logger("commentboard.cache")


@dataclass
class _Entry:
    value: Any = None
    fresh: bool = False
    generation: int = 0


class TagCache:
    """Process-wide registry of cached reads keyed by tag.

    Create one per application, pass it to every reader and writer, and
    close it on shutdown.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: Dict[str, _Entry] = {}
        self._invalidations: Dict[str, int] = {}
        self._closed = False

    def read(self, tag: str, fetcher: Callable[[], T]) -> T:
        """
        Return the cached value for tag, fetching it when absent or stale.

        The fetcher runs outside the lock. If the tag is invalidated while
        the fetch is in flight, the result is returned but not stored as
        fresh, so the next read fetches again.

        Args:
            tag: Cache tag the read depends on
            fetcher: Zero-argument callable producing the authoritative value

        Returns:
            Cached or freshly fetched value

        Raises:
            Whatever the fetcher raises; nothing is cached in that case
        """
        with self._lock:
            entry = self._entries.setdefault(tag, _Entry())
            if entry.fresh:
                return entry.value
            generation = entry.generation

        value = fetcher()

        with self._lock:
            entry = self._entries.setdefault(tag, _Entry())
            if entry.generation == generation and not self._closed:
                entry.value = value
                entry.fresh = True
            else:
                cache_logger.debug("cache_fetch_superseded", extra={"data": {"tag": tag}})

        return value

    def invalidate(self, tag: str) -> None:
        """
        Mark every cached read under tag as stale.

        Raises:
            CacheException: If the cache has been closed
        """
        with self._lock:
            if self._closed:
                raise CacheException(
                    f"Cannot invalidate '{tag}': cache is closed", {"tag": tag}
                )
            entry = self._entries.setdefault(tag, _Entry())
            entry.fresh = False
            entry.value = None
            entry.generation += 1
            self._invalidations[tag] = self._invalidations.get(tag, 0) + 1

        cache_logger.info("cache_invalidated", extra={"data": {"tag": tag}})

    def is_fresh(self, tag: str) -> bool:
        with self._lock:
            entry = self._entries.get(tag)
            return entry is not None and entry.fresh

    def invalidation_count(self, tag: str) -> int:
        """Number of times tag has been invalidated since the cache was created."""
        with self._lock:
            return self._invalidations.get(tag, 0)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Drop every entry; later invalidations raise CacheException."""
        with self._lock:
            self._entries.clear()
            self._closed = True
        cache_logger.info("cache_closed")
