"""In-process, time-bounded store for search responses."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace
from typing import Callable, Dict, Hashable, Optional

from .models import CacheEntry

logger = logging.getLogger(__name__)


class ResultCache:
    """Thread-safe TTL cache keyed by (postal code, radius, limit).

    Expired entries are never returned; they are dropped lazily on the next
    ``get`` for their key or by ``purge_expired``.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: Dict[Hashable, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[CacheEntry]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if now >= entry.expires_at:
                del self._entries[key]
                logger.debug("Evicted expired cache entry for key=%s", key)
                return None
            return entry

    def put(self, key: Hashable, entry: CacheEntry, ttl_seconds: float) -> CacheEntry:
        stored = replace(entry, expires_at=self._clock() + ttl_seconds)
        with self._lock:
            self._entries[key] = stored
        return stored

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [key for key, entry in self._entries.items() if now >= entry.expires_at]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.info("Purged %d expired cache entries", len(expired))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
