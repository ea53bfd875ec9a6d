"""Item repository protocol."""

from collections.abc import Mapping
from typing import Any, Protocol

from stockroom.core.errors import DomainError
from stockroom.core.result import Result
from stockroom.domain.entities import Item, ItemQuery


class ItemRepositoryProtocol(Protocol):
    """Persistence operations on items (soft-deleted rows are invisible)."""

    async def create(self, data: Mapping[str, Any]) -> Result[Item, DomainError]: ...

    async def find_by_id(self, item_id: int) -> Result[Item | None, DomainError]: ...

    async def find_all(self, query: ItemQuery) -> Result[list[Item], DomainError]: ...

    async def update(
        self, item_id: int, changes: Mapping[str, Any]
    ) -> Result[Item, DomainError]:
        """Apply ``changes``; NotFoundError if the item is missing or deleted."""
        ...

    async def delete(self, item_id: int) -> Result[None, DomainError]:
        """Soft delete: stamp ``deleted_at`` and archive the item."""
        ...
