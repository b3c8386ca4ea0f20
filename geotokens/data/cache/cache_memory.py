"""
In-memory cache implementation with TTL support.
"""
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .cache_interface import CacheInterface


@dataclass
class CacheEntry:
    """Cache entry with expiration tracking."""
    value: Any
    created_at: float
    ttl: Optional[int] = None

    @property
    def is_expired(self) -> bool:
        if self.ttl is None:
            return False
        return time.monotonic() > (self.created_at + self.ttl)


class InMemoryCache(CacheInterface):
    """
    Process-local cache for loaded abbreviation groups.

    Expired entries are evicted lazily on access.
    """

    def __init__(self, default_ttl: Optional[int] = None):
        self._data: Dict[str, CacheEntry] = {}
        self._default_ttl = default_ttl
        self._hits = 0
        self._misses = 0
        self._sets = 0
        self._deletes = 0

    def _live_entry(self, key: str) -> Optional[CacheEntry]:
        entry = self._data.get(key)
        if entry is not None and entry.is_expired:
            self._data.pop(key, None)
            return None
        return entry

    async def get(self, key: str) -> Optional[Any]:
        """Get value by key, return None if expired or missing."""
        entry = self._live_entry(key)
        if entry is None:
            self._misses += 1
            return None
        self._hits += 1
        return entry.value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        self._data[key] = CacheEntry(
            value=value,
            created_at=time.monotonic(),
            ttl=ttl if ttl is not None else self._default_ttl,
        )
        self._sets += 1

    async def delete(self, key: str) -> bool:
        existed = self._data.pop(key, None) is not None
        if existed:
            self._deletes += 1
        return existed

    async def exists(self, key: str) -> bool:
        return self._live_entry(key) is not None

    async def clear(self) -> None:
        self._deletes += len(self._data)
        self._data.clear()

    async def get_stats(self) -> Dict[str, Any]:
        total_requests = self._hits + self._misses
        hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0

        return {
            "type": "in_memory",
            "entries": len(self._data),
            "hits": self._hits,
            "misses": self._misses,
            "sets": self._sets,
            "deletes": self._deletes,
            "hit_rate": f"{hit_rate:.1f}%",
            "total_requests": total_requests,
        }
