"""Pytest configuration and shared fixtures.

Settings are read from the environment at import time, so the defaults
below must be in place before any ``stockroom`` module is imported.

Fixtures:
- redis_client / store: in-process fakeredis behind RedisKeyValueStore
- hasher: bcrypt at the minimum cost factor (fast)
- token_service: JWTTokenService wired to the fake store
- database / session: SQLite in memory (aiosqlite) with all tables created
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/0")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-bytes-long")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fakeredis.aioredis import FakeRedis  # noqa: E402

from stockroom.infrastructure.cache import RedisKeyValueStore  # noqa: E402
from stockroom.infrastructure.persistence import Database  # noqa: E402
from stockroom.infrastructure.security import BcryptHasher, JWTTokenService  # noqa: E402

TEST_SECRET_KEY = "test-secret-key-that-is-at-least-32-bytes-long"


@pytest.fixture
def logger():
    """Logger double; records calls without configuring structlog."""
    return Mock()


@pytest_asyncio.fixture
async def redis_client():
    client = FakeRedis()
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture
def store(redis_client):
    return RedisKeyValueStore(redis_client=redis_client)


@pytest.fixture
def hasher():
    return BcryptHasher(cost_factor=4)


@pytest.fixture
def token_service(store, hasher, logger):
    return JWTTokenService(
        secret_key=TEST_SECRET_KEY,
        store=store,
        hasher=hasher,
        logger=logger,
    )


@pytest_asyncio.fixture
async def database():
    """Fresh in-memory database per test."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def session(database):
    async with database.get_session() as db_session:
        yield db_session
