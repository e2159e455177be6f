"""In-process TTL cache and single-value memoization.

TtlMemoCache wraps a cachetools.TTLCache with one TTL for every entry.
Expired entries are evicted lazily when the cache is read; there is no
sweep and no size bound. MemoizedValue uses one constant key of a
TtlMemoCache to memoize a single expensive, globally shared value (e.g. the
cross-organization membership snapshot).

Both live on app.state and are shared by all request tasks of the event
loop without locks. Concurrent misses may each run the fetch and the last
write wins, unless MemoizedValue is built with share_inflight=True.
"""

from __future__ import annotations

import asyncio
import math
import time
from collections.abc import Awaitable, Callable, Hashable
from typing import Generic, TypeVar

from cachetools import TTLCache

from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import add_span_event

logger = get_logger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class TtlMemoCache(Generic[K, V]):
    """Key/value cache where each entry is valid for ttl_seconds after set().

    An entry stays valid while clock() < set time + ttl_seconds.

    Args:
        ttl_seconds: Lifetime of every entry, fixed for the whole cache.
        clock: Monotonic time source in seconds (injectable for tests).
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._entries: TTLCache = TTLCache(maxsize=math.inf, ttl=ttl_seconds, timer=clock)

    def get(self, key: K) -> V | None:
        """Return the value for key, or None if missing or expired.

        Expired entries are removed as a side effect.
        """
        self._entries.expire()
        return self._entries.get(key)

    def set(self, key: K, value: V) -> None:
        """Insert or overwrite key; its TTL restarts from the current clock reading."""
        self._entries[key] = value

    def delete(self, key: K) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        """Number of stored entries, including expired ones not yet read."""
        return len(self._entries)


class MemoizedValue(Generic[V]):
    """A single value memoized for a fixed TTL, with manual refresh.

    Backed by a CacheProtocol under one constant key. get_or_fetch() returns
    the cached value or awaits the fetch and stores its result; a failed
    fetch propagates and leaves the slot untouched, so the next call retries.

    With share_inflight=True, concurrent misses await the same pending fetch
    instead of each starting their own.
    """

    def __init__(
        self,
        key: str,
        cache: CacheProtocol[str, V],
        *,
        share_inflight: bool = False,
    ) -> None:
        self.key = key
        self._cache = cache
        self.share_inflight = share_inflight
        self._inflight: asyncio.Task[V] | None = None

    @classmethod
    def with_ttl(
        cls,
        key: str,
        ttl_seconds: float,
        *,
        share_inflight: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> "MemoizedValue[V]":
        """Build a MemoizedValue over a private TtlMemoCache."""
        return cls(
            key,
            TtlMemoCache(ttl_seconds, clock=clock),
            share_inflight=share_inflight,
        )

    def get(self) -> V | None:
        return self._cache.get(self.key)

    def set(self, value: V) -> None:
        self._cache.set(self.key, value)

    def invalidate(self) -> None:
        """Drop the memoized value; the next get_or_fetch() fetches again."""
        self._cache.delete(self.key)

    async def get_or_fetch(self, fetch: Callable[[], Awaitable[V]]) -> V:
        """Return the memoized value, fetching and storing it on a miss."""
        value = self._cache.get(self.key)
        if value is not None:
            logger.debug("Memo cache HIT: %s", self.key)
            add_span_event("cache.hit", {"cache.key": self.key})
            return value
        logger.debug("Memo cache MISS: %s", self.key)
        add_span_event("cache.miss", {"cache.key": self.key})
        if self.share_inflight:
            return await self._fetch_shared(fetch)
        return await self.refresh(fetch)

    async def refresh(self, fetch: Callable[[], Awaitable[V]]) -> V:
        """Fetch unconditionally and store the result."""
        value = await fetch()
        self._cache.set(self.key, value)
        logger.debug("Memo cache SET: %s", self.key)
        return value

    def _clear_inflight(self, task: "asyncio.Task[V]") -> None:
        if self._inflight is task:
            self._inflight = None
        if not task.cancelled():
            # retrieve so a failure whose waiters were all cancelled is not reported as unretrieved
            task.exception()

    async def _fetch_shared(self, fetch: Callable[[], Awaitable[V]]) -> V:
        """Join the pending fetch, or start one that every concurrent miss awaits.

        The fetch runs as its own task: cancelling a waiter (including the one
        that started it) leaves the fetch running, and its result is still stored.
        """
        task = self._inflight
        if task is None:
            task = asyncio.ensure_future(self.refresh(fetch))
            task.add_done_callback(self._clear_inflight)
            self._inflight = task
        return await asyncio.shield(task)
