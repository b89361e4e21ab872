"""In-memory implementation of CachePort for testing.

Expiry is evaluated against an injectable clock so tests can move time.
"""

import time
from collections.abc import Callable


class FakeCache:
    def __init__(self, clock: Callable[[], float] = time.monotonic, available: bool = True):
        self.clock = clock
        self.available = available
        self.entries: dict[str, tuple[str, float]] = {}

    def get(self, key: str) -> str | None:
        if not self.available:
            return None
        entry = self.entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.clock() >= expires_at:
            del self.entries[key]
            return None
        return value

    def setex(self, key: str, ttl_seconds: int, value: str) -> bool:
        if not self.available:
            return False
        self.entries[key] = (value, self.clock() + ttl_seconds)
        return True

    def ping(self) -> bool:
        return self.available
