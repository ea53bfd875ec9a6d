"""Redis adapter implementing KeyValueStoreProtocol.

Wraps an async Redis client. Every Redis failure is mapped to a
DatabaseError, the store counts as storage for error-reporting purposes.
Key names are kept out of client-facing messages since they embed user ids.

Architecture:
- Implements KeyValueStoreProtocol without inheritance (structural typing)
- Returns Result types for all operations
- No retries: failures surface immediately
"""

from redis.asyncio import Redis
from redis.exceptions import RedisError

from stockroom.core.errors import DatabaseError
from stockroom.core.result import Failure, Result, Success


class RedisKeyValueStore:
    """Redis implementation of KeyValueStoreProtocol.

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize the store.

        Args:
            redis_client: Async Redis client instance.
        """
        self._redis = redis_client

    async def set_with_ttl(
        self, key: str, value: str, ttl_seconds: int
    ) -> Result[None, DatabaseError]:
        """Store a value with expiry (SETEX).

        Args:
            key: Store key.
            value: Value to store.
            ttl_seconds: Time to live in seconds, must be positive.

        Returns:
            Result with None on success, or DatabaseError.
        """
        try:
            await self._redis.setex(key, ttl_seconds, value)
            return Success(value=None)
        except RedisError as e:
            return Failure(
                error=DatabaseError(message="Failed to write to key-value store", cause=e)
            )

    async def get(self, key: str) -> Result[str | None, DatabaseError]:
        """Get a value.

        Returns:
            Result with the value, None if absent/expired, or DatabaseError.
        """
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return Failure(
                error=DatabaseError(message="Failed to read from key-value store", cause=e)
            )
        if value is None:
            return Success(value=None)
        # Redis returns bytes unless the client decodes responses
        decoded = value.decode("utf-8") if isinstance(value, bytes) else value
        return Success(value=decoded)

    async def delete(self, key: str) -> Result[int, DatabaseError]:
        """Delete a key.

        Returns:
            Result with the number of keys removed, or DatabaseError.
        """
        try:
            deleted_count = await self._redis.delete(key)
            return Success(value=int(deleted_count))
        except RedisError as e:
            return Failure(
                error=DatabaseError(message="Failed to delete from key-value store", cause=e)
            )
