"""Time-boxed in-memory cache for query results."""

import time
from collections.abc import Callable, Hashable
from typing import Any


DEFAULT_TTL_SECONDS = 300.0


class TimedQueryCache:
    """Cache entries for ``ttl_seconds`` after they are stored.

    Entries are not refreshed on read, so a hit may return a stale value
    until the entry expires or is invalidated.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[Hashable, tuple[float, Any]] = {}

    def get(self, key: Hashable) -> tuple[bool, Any]:
        """Return ``(hit, value)`` for a key, evicting it when expired."""
        entry = self._entries.get(key)
        if entry is None:
            return False, None
        stored_at, value = entry
        if self._clock() - stored_at >= self._ttl_seconds:
            del self._entries[key]
            return False, None
        return True, value

    def set(self, key: Hashable, value: Any) -> None:
        """Store a value and drop every entry that has already expired."""
        now = self._clock()
        expired = [
            stored_key
            for stored_key, (stored_at, _) in self._entries.items()
            if now - stored_at >= self._ttl_seconds
        ]
        for stored_key in expired:
            del self._entries[stored_key]
        self._entries[key] = (now, value)

    def invalidate(self, key: Hashable | None = None) -> None:
        """Drop one entry, or every entry when ``key`` is None."""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["TimedQueryCache", "DEFAULT_TTL_SECONDS"]
