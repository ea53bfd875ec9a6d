"""Inventory service.

Propagation gives every descendant space of an item's space its own
inventory row for that item. It runs as two round-trips (read which spaces
already hold the item, then one batch insert) with no transaction between
them; the repository's insert skips (item, space) pairs that another run
created in the meantime, so the returned count is the rows this call
actually created.
"""

from stockroom.core.errors import DomainError
from stockroom.core.result import Failure, Result, Success
from stockroom.domain.entities import (
    InventoryRecord,
    ItemForPropagation,
    NewInventory,
)
from stockroom.domain.entities.inventory import DEFAULT_SPACE_TYPE
from stockroom.domain.protocols import (
    InventoryRepositoryProtocol,
    LoggerProtocol,
    SpaceLookupProtocol,
)
from stockroom.domain.value_objects import PropagationResult

_NOTHING_CREATED = PropagationResult(updated_count=0)


class InventoryService:
    """Inventory use cases."""

    def __init__(
        self,
        space_lookup: SpaceLookupProtocol,
        inventory_repository: InventoryRepositoryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._spaces = space_lookup
        self._inventories = inventory_repository
        self._logger = logger

    async def propagate_to_child_spaces(
        self, item: ItemForPropagation
    ) -> Result[PropagationResult, DomainError]:
        """Create inventory rows for the item in every descendant space.

        Existing rows are never touched. The item's own space is not a
        descendant and gets no row from this operation.

        Args:
            item: Item projection; never mutated.

        Returns:
            Success(PropagationResult) with the number of rows created (0 for
            an unassigned item, a leaf space, or when every descendant
            already holds the item), or the first collaborator Failure.
        """
        if item.space_id is None:
            return Success(value=_NOTHING_CREATED)

        match await self._spaces.find_children_ids(item.space_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=children_ids):
                pass

        if not children_ids:
            return Success(value=_NOTHING_CREATED)

        match await self._inventories.find_existing_space_ids(item.id, children_ids):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=existing_ids):
                pass

        rows = [
            self._new_inventory(item, space_id)
            for space_id in children_ids
            if space_id not in existing_ids
        ]
        if not rows:
            return Success(value=_NOTHING_CREATED)

        match await self._inventories.create_batch(rows):
            case Failure(error=error):
                self._logger.error(
                    "Inventory propagation failed",
                    item_id=item.id,
                    space_id=item.space_id,
                )
                return Failure(error=error)
            case Success(value=created):
                pass

        self._logger.info(
            "Inventory propagated",
            item_id=item.id,
            space_id=item.space_id,
            descendants=len(children_ids),
            created=created,
        )
        return Success(value=PropagationResult(updated_count=created))

    async def find_by_item_id(
        self, item_id: int
    ) -> Result[list[InventoryRecord], DomainError]:
        """List inventory rows held for an item across spaces."""
        return await self._inventories.find_by_item_id(item_id)

    @staticmethod
    def _new_inventory(item: ItemForPropagation, space_id: int) -> NewInventory:
        return NewInventory(
            item_id=item.id,
            space_id=space_id,
            name=item.name,
            code=item.code,
            sku=item.sku,
            status=item.status,
            notes=item.notes,
            balance="0",
            cost_per_unit=item.cost or "0",
            space_type=item.space_type or DEFAULT_SPACE_TYPE,
        )
