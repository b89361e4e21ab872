from typing import Protocol


class CachePort(Protocol):
    """Protocol for a string key/value cache with expiry."""

    def get(self, key: str) -> str | None:
        """Return the cached value, or None on miss or when the cache is unavailable."""
        ...

    def setex(self, key: str, ttl_seconds: int, value: str) -> bool:
        """Store value with expiry. Return True if stored."""
        ...

    def ping(self) -> bool: ...
