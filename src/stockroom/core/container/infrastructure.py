"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite)
- Key-value store (Redis)
- Secret hashing (bcrypt)
- Token service (JWT)
- Logging (structlog)

Each factory is cached with ``lru_cache`` and constructs its collaborators
explicitly. Tests replace them through ``app.dependency_overrides`` or by
calling the constructors directly.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.config import settings
from stockroom.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from stockroom.domain.protocols import (
        KeyValueStoreProtocol,
        LoggerProtocol,
        SecretHashingProtocol,
        TokenServiceProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_redis_client() -> "Redis":
    """Get Redis client singleton (app-scoped).

    The connection pool is shared across the entire application.
    """
    from redis.asyncio import ConnectionPool, Redis

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return Redis(connection_pool=pool)


@lru_cache()
def get_key_value_store() -> "KeyValueStoreProtocol":
    """Get expiring key-value store singleton (app-scoped).

    Returns:
        RedisKeyValueStore over the shared Redis client.
    """
    from stockroom.infrastructure.cache import RedisKeyValueStore

    return RedisKeyValueStore(redis_client=get_redis_client())


@lru_cache()
def get_password_hasher() -> "SecretHashingProtocol":
    """Get secret hashing service singleton (app-scoped).

    Returns BcryptHasher with the configured cost factor. Used for both user
    passwords and stored refresh tokens.
    """
    from stockroom.infrastructure.security import BcryptHasher

    return BcryptHasher(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenServiceProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns:
        JWTTokenService signing with settings.secret_key and keeping refresh
        token hashes in the key-value store.
    """
    from stockroom.infrastructure.security import JWTTokenService

    return JWTTokenService(
        secret_key=settings.secret_key,
        store=get_key_value_store(),
        hasher=get_password_hasher(),
        logger=get_logger(),
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from stockroom.infrastructure.logging import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
