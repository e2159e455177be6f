"""Cache: process-local TTL memo cache and single-value memoization.

Used by the people directory to memoize the cross-organization membership
snapshot and the corporate link set. Nothing is persisted; contents are
lost on restart.
"""

from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.memory_cache import MemoizedValue, TtlMemoCache

__all__ = [
    "CacheProtocol",
    "MemoizedValue",
    "TtlMemoCache",
]
