"""Unit tests for InventoryService.

Tests cover:
- No-op paths (unassigned item, leaf space, everything already present)
- Rows built for missing descendants only, with copied fields and tags
- Count comes from the repository's insert
- Collaborator failures pass through unchanged
"""

from unittest.mock import AsyncMock, Mock

import pytest

from stockroom.application.services import InventoryService
from stockroom.core.errors import DatabaseError
from stockroom.core.result import Failure, Success
from stockroom.domain.entities import ItemForPropagation
from stockroom.domain.value_objects import PropagationResult


def _item(**overrides) -> ItemForPropagation:
    fields = {
        "id": 42,
        "name": "Widget",
        "code": "W-1",
        "sku": "SKU-1",
        "cost": "9.99",
        "status": "active",
        "notes": "fragile",
        "space_id": 1,
        "space_type": "WAREHOUSE",
    }
    fields.update(overrides)
    return ItemForPropagation(**fields)


def _service():
    spaces = AsyncMock()
    inventories = AsyncMock()
    service = InventoryService(
        space_lookup=spaces, inventory_repository=inventories, logger=Mock()
    )
    return service, spaces, inventories


@pytest.mark.unit
class TestPropagateNoOps:
    """Test the short-circuit paths."""

    async def test_unassigned_item_touches_nothing(self):
        service, spaces, inventories = _service()

        result = await service.propagate_to_child_spaces(_item(space_id=None))

        assert result == Success(value=PropagationResult(updated_count=0))
        spaces.find_children_ids.assert_not_awaited()
        inventories.create_batch.assert_not_awaited()

    async def test_leaf_space(self):
        service, spaces, inventories = _service()
        spaces.find_children_ids.return_value = Success(value=[])

        result = await service.propagate_to_child_spaces(_item())

        assert result == Success(value=PropagationResult(updated_count=0))
        inventories.find_existing_space_ids.assert_not_awaited()

    async def test_all_descendants_already_stocked(self):
        service, spaces, inventories = _service()
        spaces.find_children_ids.return_value = Success(value=[2, 3])
        inventories.find_existing_space_ids.return_value = Success(value={2, 3})

        result = await service.propagate_to_child_spaces(_item())

        assert result == Success(value=PropagationResult(updated_count=0))
        inventories.create_batch.assert_not_awaited()


@pytest.mark.unit
class TestPropagateCreates:
    """Test row construction and counting."""

    async def test_creates_rows_for_missing_descendants(self):
        # Arrange
        service, spaces, inventories = _service()
        spaces.find_children_ids.return_value = Success(value=[2, 3, 4])
        inventories.find_existing_space_ids.return_value = Success(value={3})
        inventories.create_batch.return_value = Success(value=2)

        # Act
        result = await service.propagate_to_child_spaces(_item())

        # Assert
        assert result == Success(value=PropagationResult(updated_count=2))
        inventories.find_existing_space_ids.assert_awaited_once_with(42, [2, 3, 4])
        rows = inventories.create_batch.await_args.args[0]
        assert sorted(row.space_id for row in rows) == [2, 4]

    async def test_rows_copy_item_fields_and_tags(self):
        service, spaces, inventories = _service()
        spaces.find_children_ids.return_value = Success(value=[2])
        inventories.find_existing_space_ids.return_value = Success(value=set())
        inventories.create_batch.return_value = Success(value=1)

        await service.propagate_to_child_spaces(_item())

        (row,) = inventories.create_batch.await_args.args[0]
        assert row.item_id == 42
        assert (row.name, row.code, row.sku) == ("Widget", "W-1", "SKU-1")
        assert (row.status, row.notes) == ("active", "fragile")
        assert row.balance == "0"
        assert row.cost_per_unit == "9.99"
        assert row.item_type == "ITM"
        assert row.model_type == "SUP"
        assert row.parent_type == "IVT"
        assert row.space_type == "WAREHOUSE"

    async def test_defaults_for_missing_cost_and_space_type(self):
        service, spaces, inventories = _service()
        spaces.find_children_ids.return_value = Success(value=[2])
        inventories.find_existing_space_ids.return_value = Success(value=set())
        inventories.create_batch.return_value = Success(value=1)

        await service.propagate_to_child_spaces(_item(cost=None, space_type=None))

        (row,) = inventories.create_batch.await_args.args[0]
        assert row.cost_per_unit == "0"
        assert row.space_type == "SPACE"

    async def test_count_is_rows_actually_inserted(self):
        # A concurrent run inserted one of the rows between read and write
        service, spaces, inventories = _service()
        spaces.find_children_ids.return_value = Success(value=[2, 3])
        inventories.find_existing_space_ids.return_value = Success(value=set())
        inventories.create_batch.return_value = Success(value=1)

        result = await service.propagate_to_child_spaces(_item())

        assert result == Success(value=PropagationResult(updated_count=1))


@pytest.mark.unit
class TestPropagateFailures:
    """Test that collaborator failures pass through."""

    @pytest.mark.parametrize("failing", ["find_children_ids", "find_existing_space_ids", "create_batch"])
    async def test_failure_passes_through(self, failing):
        # Arrange
        service, spaces, inventories = _service()
        spaces.find_children_ids.return_value = Success(value=[2])
        inventories.find_existing_space_ids.return_value = Success(value=set())
        inventories.create_batch.return_value = Success(value=1)
        error = DatabaseError(message="Failed")
        target = spaces if failing == "find_children_ids" else inventories
        getattr(target, failing).return_value = Failure(error=error)

        # Act
        result = await service.propagate_to_child_spaces(_item())

        # Assert
        assert result == Failure(error=error)


@pytest.mark.unit
async def test_find_by_item_id_delegates():
    service, _, inventories = _service()
    inventories.find_by_item_id.return_value = Success(value=[])

    result = await service.find_by_item_id(42)

    assert result == Success(value=[])
    inventories.find_by_item_id.assert_awaited_once_with(42)
