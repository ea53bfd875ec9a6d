"""Helpers for integration tests against SQLite."""

import pytest

from stockroom.infrastructure.persistence.base import utc_now
from stockroom.infrastructure.persistence.mappers import parse_decimal
from stockroom.infrastructure.persistence.models import ItemModel, SpaceModel


@pytest.fixture
def add_space(session):
    """Insert a space row and return its id."""

    async def _add_space(
        name: str,
        parent_id: int | None = None,
        *,
        deleted: bool = False,
    ) -> int:
        space = SpaceModel(
            name=name,
            parent_id=parent_id,
            space_type="SPACE",
            deleted_at=utc_now() if deleted else None,
        )
        session.add(space)
        await session.flush()
        return space.id

    return _add_space


@pytest.fixture
def add_item(session):
    """Insert an item row and return its id."""

    async def _add_item(name: str = "Widget", **fields) -> int:
        for field_name in ("price", "cost"):
            if field_name in fields:
                fields[field_name] = parse_decimal(fields[field_name])
        item = ItemModel(name=name, **fields)
        session.add(item)
        await session.flush()
        return item.id

    return _add_item
