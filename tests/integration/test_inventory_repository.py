"""Integration tests for InventoryRepository on SQLite.

Tests cover:
- Batch insert counts only new rows
- (item, space) uniqueness holds under conflicting inserts
- Existence checks and reads with decimal normalization
- Soft-deleted rows hidden from reads
"""

import pytest
from sqlalchemy import func, select, update

from stockroom.core.result import Success
from stockroom.domain.entities import NewInventory
from stockroom.infrastructure.persistence.base import utc_now
from stockroom.infrastructure.persistence.models import InventoryModel
from stockroom.infrastructure.persistence.repositories import InventoryRepository


def _row(item_id: int, space_id: int, **overrides) -> NewInventory:
    fields = {
        "item_id": item_id,
        "space_id": space_id,
        "name": "Widget",
        "code": "W-1",
        "sku": "SKU-1",
        "status": "active",
        "notes": None,
        "cost_per_unit": "9.99",
    }
    fields.update(overrides)
    return NewInventory(**fields)


async def _count(session) -> int:
    return (await session.execute(select(func.count(InventoryModel.id)))).scalar_one()


@pytest.mark.integration
class TestCreateBatch:
    """Test the single-statement insert."""

    async def test_empty_batch_writes_nothing(self, session):
        result = await InventoryRepository(session).create_batch([])

        assert result == Success(value=0)
        assert await _count(session) == 0

    async def test_inserts_all_new_rows(self, session, add_space, add_item):
        item = await add_item()
        first = await add_space("first")
        second = await add_space("second")

        result = await InventoryRepository(session).create_batch(
            [_row(item, first), _row(item, second)]
        )

        assert result == Success(value=2)
        assert await _count(session) == 2

    async def test_conflicting_rows_skipped_and_not_counted(
        self, session, add_space, add_item
    ):
        # Arrange: another writer already created (item, first)
        item = await add_item()
        first = await add_space("first")
        second = await add_space("second")
        repo = InventoryRepository(session)
        await repo.create_batch([_row(item, first, cost_per_unit="1")])

        # Act
        result = await repo.create_batch([_row(item, first), _row(item, second)])

        # Assert
        assert result == Success(value=1)
        assert await _count(session) == 2
        existing = await repo.find_by_space_and_item(first, item)
        assert isinstance(existing, Success)
        assert existing.value.cost_per_unit == "1"


@pytest.mark.integration
class TestReads:
    """Test read operations."""

    async def test_find_by_item_id_normalizes_decimals(self, session, add_space, add_item):
        item = await add_item()
        space = await add_space("space")
        repo = InventoryRepository(session)
        await repo.create_batch([_row(item, space)])

        result = await repo.find_by_item_id(item)

        assert isinstance(result, Success)
        (record,) = result.value
        assert record.balance == "0"
        assert record.cost_per_unit == "9.99"
        assert record.space_id == space

    async def test_find_existing_space_ids(self, session, add_space, add_item):
        item = await add_item()
        other_item = await add_item("Other")
        first = await add_space("first")
        second = await add_space("second")
        third = await add_space("third")
        repo = InventoryRepository(session)
        await repo.create_batch([_row(item, first), _row(other_item, second)])

        result = await repo.find_existing_space_ids(item, [first, second, third])

        assert result == Success(value={first})

    async def test_find_existing_space_ids_empty_input(self, session):
        result = await InventoryRepository(session).find_existing_space_ids(1, [])

        assert result == Success(value=set())

    async def test_soft_deleted_rows_hidden(self, session, add_space, add_item):
        item = await add_item()
        space = await add_space("space")
        repo = InventoryRepository(session)
        await repo.create_batch([_row(item, space)])
        await session.execute(
            update(InventoryModel)
            .where(InventoryModel.item_id == item)
            .values(deleted_at=utc_now())
        )

        by_item = await repo.find_by_item_id(item)
        by_pair = await repo.find_by_space_and_item(space, item)

        assert by_item == Success(value=[])
        assert by_pair == Success(value=None)
