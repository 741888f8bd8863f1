# ABOUTME: Key-value cache stores with TTL for serialized weather snapshots.
# ABOUTME: Provides query key normalization, an in-process store, and a Redis-backed store.

import logging
import re
import time
from collections.abc import Callable
from typing import Protocol, runtime_checkable

import redis.asyncio as redis
from redis.exceptions import RedisError

from src.config import Settings

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "weather_data_"
MEMORY_CACHE_MAX_ENTRIES = 1000

_WHITESPACE = re.compile(r"\s+")


def cache_key(query: str) -> str:
    """Normalize a location query into a cache key.

    Lowercased, trimmed, and each whitespace run collapsed to one underscore.
    Queries that differ only in case or spacing share an entry.
    """
    return CACHE_KEY_PREFIX + _WHITESPACE.sub("_", query.strip().lower())


@runtime_checkable
class CacheStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str, ttl: int) -> None: ...


class MemoryCache:
    """Process-local cache.

    Expired entries are dropped on read and swept on every write. Past
    max_entries the oldest writes are evicted first.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, max_entries: int = MEMORY_CACHE_MAX_ENTRIES):
        self._clock = clock
        self._max_entries = max_entries
        self._entries: dict[str, tuple[float, str]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> str | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl: int) -> None:
        now = self._clock()
        self._sweep(now)
        # Re-inserting moves the key to the newest position.
        self._entries.pop(key, None)
        self._entries[key] = (now + ttl, value)
        while len(self._entries) > self._max_entries:
            oldest = next(iter(self._entries))
            del self._entries[oldest]

    def _sweep(self, now: float) -> None:
        expired = [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]
        for k in expired:
            del self._entries[k]
        if expired:
            logger.debug("Swept %d expired cache entries", len(expired))

    def clear(self) -> None:
        self._entries.clear()


class RedisCache:
    """Redis-backed cache shared between processes.

    Backend errors degrade to a miss on read and a skipped write.
    """

    def __init__(self, client: redis.Redis):
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisCache":
        return cls(redis.from_url(url, encoding="utf-8", decode_responses=True))

    async def get(self, key: str) -> str | None:
        try:
            return await self._client.get(key)
        except RedisError as e:
            logger.warning("Cache read failed for %s: %s", key, e)
            return None

    async def set(self, key: str, value: str, ttl: int) -> None:
        try:
            await self._client.set(key, value, ex=ttl)
        except RedisError as e:
            logger.warning("Cache write failed for %s: %s", key, e)


def create_cache(settings: Settings) -> CacheStore:
    if settings.cache_url:
        return RedisCache.from_url(settings.cache_url)
    return MemoryCache()
