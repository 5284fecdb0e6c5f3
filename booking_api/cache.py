"""Response cache for list endpoints.

Pattern: In-memory cache keyed by request path + query string, with TTL.

- Entries expire after ``ttl`` seconds
- Bounded size: expired entries are dropped first, then the oldest
- Write-invalidation: the API clears the cache after every successful
  POST/PUT/DELETE, so a read never returns data older than the last write.
  A payload built across a clear is dropped instead of stored (generations)
- Thread-safe (FastAPI runs sync handlers in a thread pool)
"""
import threading
import time
from typing import Any, Dict, List, Optional, Tuple


class ResponseCache:
    """TTL cache of JSON-serializable response payloads."""

    def __init__(self, ttl: float = 300, max_size: int = 500):
        """
        Initialize response cache.

        Args:
            ttl: Time-to-live in seconds (default: 5 minutes)
            max_size: Maximum number of entries kept (default: 500)
        """
        self.ttl = ttl
        self.max_size = max_size
        # {key: (payload, stored_at)}
        self._entries: Dict[str, Tuple[Any, float]] = {}
        self._lock = threading.Lock()
        # Bumped by clear(); payloads built before a clear are not stored
        self._generation = 0

    @staticmethod
    def make_key(path: str, query: str = "") -> str:
        """Build the cache key for a request."""
        return f"{path}?{query}" if query else path

    def _is_expired(self, timestamp: float) -> bool:
        return time.time() - timestamp >= self.ttl

    def get(self, key: str) -> Optional[Any]:
        """
        Get a cached payload.

        Returns:
            Cached payload or None if not found/expired
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            payload, timestamp = entry
            if self._is_expired(timestamp):
                del self._entries[key]
                return None

            return payload

    @property
    def generation(self) -> int:
        """Number of clears so far. Read it before building a payload."""
        with self._lock:
            return self._generation

    def set(self, key: str, payload: Any, generation: Optional[int] = None) -> bool:
        """
        Store a payload under ``key``.

        Args:
            key: Cache key
            payload: JSON-serializable payload
            generation: Value of ``generation`` taken before the payload was
                built. If the cache was cleared since, the payload may predate
                a write and is not stored.

        Returns:
            True if stored
        """
        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            self._entries[key] = (payload, time.time())
            self._evict_if_needed()
            return True

    def _evict_if_needed(self) -> None:
        # Caller holds the lock
        if len(self._entries) <= self.max_size:
            return

        current_time = time.time()
        expired_keys = [
            key for key, (_, ts) in self._entries.items()
            if current_time - ts >= self.ttl
        ]
        for key in expired_keys:
            del self._entries[key]

        if len(self._entries) > self.max_size:
            sorted_items = sorted(self._entries.items(), key=lambda item: item[1][1])
            to_remove = len(self._entries) - self.max_size
            for key, _ in sorted_items[:to_remove]:
                del self._entries[key]

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()
            self._generation += 1

    def cleanup_expired(self) -> int:
        """Remove all expired entries. Returns how many were removed."""
        with self._lock:
            current_time = time.time()
            expired_keys = [
                key for key, (_, ts) in self._entries.items()
                if current_time - ts >= self.ttl
            ]
            for key in expired_keys:
                del self._entries[key]
            return len(expired_keys)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._entries.keys())

    def stats(self) -> Dict[str, Any]:
        """Cache size, keys and limits."""
        with self._lock:
            return {
                "size": len(self._entries),
                "keys": list(self._entries.keys()),
                "ttl": self.ttl,
                "max_size": self.max_size,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
