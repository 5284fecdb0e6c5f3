"""Tests for the list response cache."""
import time

from booking_api.cache import ResponseCache


class TestResponseCache:
    """TTL, size bound and invalidation."""

    def setup_method(self):
        self.cache = ResponseCache(ttl=300, max_size=3)

    def test_cache_hit(self):
        self.cache.set("/api/doctors", {"total": 5})
        assert self.cache.get("/api/doctors") == {"total": 5}

    def test_missing_key(self):
        assert self.cache.get("/nope") is None

    def test_key_includes_query_string(self):
        assert ResponseCache.make_key("/api/doctors", "page=2") == "/api/doctors?page=2"
        assert ResponseCache.make_key("/api/doctors", "") == "/api/doctors"

    def test_cache_expiration(self):
        self.cache.ttl = 0.1
        self.cache.set("k", {"v": 1})
        assert self.cache.get("k") is not None

        time.sleep(0.2)

        assert self.cache.get("k") is None
        assert len(self.cache) == 0

    def test_size_is_bounded_oldest_evicted(self):
        for i in range(5):
            self.cache.set(f"k{i}", i)
            time.sleep(0.001)

        assert len(self.cache) == 3
        assert self.cache.keys() == ["k2", "k3", "k4"]

    def test_clear(self):
        self.cache.set("a", 1)
        self.cache.set("b", 2)
        self.cache.clear()
        assert len(self.cache) == 0

    def test_cleanup_expired(self):
        self.cache.ttl = 0.1
        self.cache.set("a", 1)
        self.cache.set("b", 2)
        time.sleep(0.2)

        assert self.cache.cleanup_expired() == 2
        assert len(self.cache) == 0

    def test_stats(self):
        self.cache.set("a", 1)
        stats = self.cache.stats()
        assert stats == {"size": 1, "keys": ["a"], "ttl": 300, "max_size": 3}

    def test_clear_advances_generation(self):
        before = self.cache.generation
        self.cache.clear()
        assert self.cache.generation == before + 1

    def test_payload_built_before_clear_is_not_stored(self):
        generation = self.cache.generation
        # A write lands while the payload is being built
        self.cache.clear()

        assert self.cache.set("/api/doctors", {"total": 5}, generation=generation) is False
        assert self.cache.get("/api/doctors") is None

    def test_payload_stored_when_generation_unchanged(self):
        generation = self.cache.generation
        assert self.cache.set("/api/doctors", {"total": 5}, generation=generation) is True
        assert self.cache.get("/api/doctors") == {"total": 5}
