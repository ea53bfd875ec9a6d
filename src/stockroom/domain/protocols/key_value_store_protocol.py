"""Expiring key-value store protocol.

The token service keeps one entry per refresh-token session here. Entries
disappear on their own when the TTL runs out.
"""

from typing import Protocol

from stockroom.core.errors import DomainError
from stockroom.core.result import Result


class KeyValueStoreProtocol(Protocol):
    """String key-value store with per-key expiry.

    All operations return Result; store failures come back as DatabaseError.
    """

    async def set_with_ttl(
        self, key: str, value: str, ttl_seconds: int
    ) -> Result[None, DomainError]:
        """Store ``value`` under ``key``, expiring after ``ttl_seconds``."""
        ...

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Return the value under ``key``, or None when absent or expired."""
        ...

    async def delete(self, key: str) -> Result[int, DomainError]:
        """Delete ``key`` and return the number of entries removed (0 or 1)."""
        ...
