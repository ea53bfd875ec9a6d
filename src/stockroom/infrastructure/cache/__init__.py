"""Expiring key-value store adapters."""

from stockroom.infrastructure.cache.cache_keys import RefreshTokenKeys
from stockroom.infrastructure.cache.redis_store import RedisKeyValueStore

__all__ = [
    "RedisKeyValueStore",
    "RefreshTokenKeys",
]
