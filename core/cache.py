# =============================================================================
# core/cache.py  —  In-memory TTL + LRU response cache
# =============================================================================
#
# Holds parsed provider responses keyed by HolidayQuery.cache_key().
#
#   - entries expire ``ttl`` seconds after they were stored
#   - reads refresh recency; over ``maxsize`` the least recently used entry
#     is evicted first
#   - expired entries are treated as misses and dropped on access
#
# The clock is injectable so tests can move time forward without sleeping.
# Contents live for the process lifetime only.
# =============================================================================

import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Optional


class ResponseCache:
    """Bounded LRU cache whose entries expire after a fixed TTL."""

    def __init__(
        self,
        maxsize: int = 500,
        ttl: float = 60 * 60 * 24,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self.ttl = ttl
        self._clock = clock
        self._entries: "OrderedDict[str, tuple[float, Any]]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        """Number of live entries; expired ones are purged first."""
        with self._lock:
            now = self._clock()
            for key in [k for k, (expires, _) in self._entries.items() if expires <= now]:
                del self._entries[key]
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return self._live(key) is not None

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._live(key)
            if entry is None:
                return None
            self._entries.move_to_end(key)
            return entry[1]

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (self._clock() + self.ttl, value)
            self._entries.move_to_end(key)
            while len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _live(self, key: str) -> Optional[tuple[float, Any]]:
        # caller holds the lock
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry[0] <= self._clock():
            del self._entries[key]
            return None
        return entry
