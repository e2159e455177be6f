"""Cache protocol for in-process memo caches (DIP)."""

from collections.abc import Hashable
from typing import Protocol, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class CacheProtocol(Protocol[K, V]):
    """Protocol for process-local key/value caches with a cache-wide TTL.

    Operations never raise; an expired or missing entry reads as None.
    """

    def get(self, key: K) -> V | None:
        """Return cached value or None when absent or expired."""
        ...

    def set(self, key: K, value: V) -> None:
        """Store value under key, stamped with the current time."""
        ...

    def delete(self, key: K) -> None:
        """Remove key from cache (no-op when absent)."""
        ...
