"""Inventory capability interfaces."""

from collections.abc import Sequence
from typing import Protocol

from stockroom.core.errors import DomainError
from stockroom.core.result import Result
from stockroom.domain.entities import (
    InventoryRecord,
    ItemForPropagation,
    NewInventory,
)
from stockroom.domain.value_objects import PropagationResult


class InventoryRepositoryProtocol(Protocol):
    """Persistence operations on inventory rows."""

    async def find_by_item_id(
        self, item_id: int
    ) -> Result[list[InventoryRecord], DomainError]: ...

    async def find_by_space_and_item(
        self, space_id: int, item_id: int
    ) -> Result[InventoryRecord | None, DomainError]: ...

    async def find_existing_space_ids(
        self, item_id: int, space_ids: Sequence[int]
    ) -> Result[set[int], DomainError]:
        """Subset of ``space_ids`` that already hold a row for ``item_id``."""
        ...

    async def create_batch(
        self, rows: Sequence[NewInventory]
    ) -> Result[int, DomainError]:
        """Insert rows in one statement; return how many were created."""
        ...


class InventoryServiceProtocol(Protocol):
    """Inventory use cases exposed to the item routes."""

    async def propagate_to_child_spaces(
        self, item: ItemForPropagation
    ) -> Result[PropagationResult, DomainError]: ...

    async def find_by_item_id(
        self, item_id: int
    ) -> Result[list[InventoryRecord], DomainError]: ...
