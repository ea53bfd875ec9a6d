"""API test fixtures.

The real application with its collaborators swapped through
``app.dependency_overrides``: SQLite in memory, fakeredis-backed token
service, fast bcrypt and a mock logger.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from stockroom.core.container import (
    get_db_session,
    get_logger,
    get_password_hasher,
    get_token_service,
)
from stockroom.infrastructure.persistence.models import SpaceModel
from stockroom.main import app


@pytest_asyncio.fixture
async def client(database, token_service, hasher, logger):
    async def _db_session():
        async with database.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = _db_session
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_logger] = lambda: logger

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as async_client:
        yield async_client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def tokens(client):
    """Sign up a user and return its token pair."""
    response = await client.post(
        "/api/v1/auth/signup",
        json={"name": "Ada", "email": "ada@example.com", "password": "Secret123!"},
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest_asyncio.fixture
async def auth_headers(tokens):
    return {"Authorization": f"Bearer {tokens['accessToken']}"}


@pytest_asyncio.fixture
async def space_chain(database):
    """Spaces root -> child -> grandchild, committed; returns their ids."""
    async with database.get_session() as session:
        root = SpaceModel(name="Warehouse", space_type="SPACE")
        session.add(root)
        await session.flush()
        child = SpaceModel(name="Aisle", parent_id=root.id, space_type="SPACE")
        session.add(child)
        await session.flush()
        grandchild = SpaceModel(name="Shelf", parent_id=child.id, space_type="SPACE")
        session.add(grandchild)
        await session.flush()
        return root.id, child.id, grandchild.id
