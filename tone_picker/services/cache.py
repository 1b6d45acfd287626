"""In-memory result cache with a fixed TTL, lazy expiry on read and a sweep after every write."""
from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from tone_picker.models.cache_entry import CacheEntry

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60
DEFAULT_KEY_PREFIX_LENGTH = 100


def make_key(text: str, x: int, y: int, prefix_length: int = DEFAULT_KEY_PREFIX_LENGTH) -> str:
    """Fingerprint a request.

    Only the first ``prefix_length`` characters of the text take part, so long texts that
    share a prefix and coordinates share one cached result.
    """
    return f"{text[:prefix_length]}_{x}_{y}"


class ResultCache:
    """Process-local key -> CacheEntry map.

    Expired entries count as absent on ``get`` even while still stored; ``put`` sweeps them out.
    One lock covers every operation on the map.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def _expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.created_at >= self.ttl_seconds

    def get(self, key: str) -> CacheEntry | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or self._expired(entry, self._clock()):
                return None
            return entry

    def put(self, key: str, value: str) -> CacheEntry:
        entry = CacheEntry(key=key, result_text=value, created_at=self._clock())
        with self._lock:
            self._entries[key] = entry
        self.sweep()
        return entry

    def sweep(self) -> int:
        """Drop every expired entry. Returns the number removed."""
        with self._lock:
            now = self._clock()
            stale = [k for k, e in self._entries.items() if self._expired(e, now)]
            for k in stale:
                del self._entries[k]
        if stale:
            logger.debug("Cache sweep removed %d expired entries", len(stale))
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
