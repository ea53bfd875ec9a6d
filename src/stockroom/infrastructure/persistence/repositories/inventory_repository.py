"""InventoryRepository - SQLAlchemy implementation of InventoryRepositoryProtocol.

Batch inserts go through the dialect's ``INSERT ... ON CONFLICT DO NOTHING``
against the (item_id, space_id) unique constraint, so two propagation runs
racing on the same item never create duplicate rows. The number of rows the
statement actually returned is the number created.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.errors import DatabaseError
from stockroom.core.result import Failure, Result, Success
from stockroom.domain.entities import InventoryRecord, NewInventory
from stockroom.infrastructure.persistence.base import not_deleted, utc_now
from stockroom.infrastructure.persistence.mappers import format_decimal, parse_decimal
from stockroom.infrastructure.persistence.models import InventoryModel

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class InventoryRepository:
    """SQLAlchemy implementation of InventoryRepositoryProtocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_item_id(
        self, item_id: int
    ) -> Result[list[InventoryRecord], DatabaseError]:
        """List live inventory rows of an item, oldest first."""
        stmt = (
            select(InventoryModel)
            .where(InventoryModel.item_id == item_id, not_deleted(InventoryModel))
            .order_by(InventoryModel.id)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(
                error=DatabaseError(
                    message=f"Failed to find inventories for item: {item_id}", cause=e
                )
            )
        return Success(value=[self._to_domain(model) for model in result.scalars()])

    async def find_by_space_and_item(
        self, space_id: int, item_id: int
    ) -> Result[InventoryRecord | None, DatabaseError]:
        """Find the live row for an (item, space) pair."""
        stmt = select(InventoryModel).where(
            InventoryModel.space_id == space_id,
            InventoryModel.item_id == item_id,
            not_deleted(InventoryModel),
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(
                error=DatabaseError(message="Failed to find inventory", cause=e)
            )
        inventory_model = result.scalar_one_or_none()
        return Success(
            value=self._to_domain(inventory_model) if inventory_model else None
        )

    async def find_existing_space_ids(
        self, item_id: int, space_ids: Sequence[int]
    ) -> Result[set[int], DatabaseError]:
        """Return the members of ``space_ids`` that already hold ``item_id``.

        Soft-deleted rows count as existing: the unique constraint still
        covers them, so inserting would be a no-op anyway.
        """
        if not space_ids:
            return Success(value=set())

        stmt = select(InventoryModel.space_id).where(
            InventoryModel.item_id == item_id,
            InventoryModel.space_id.in_(space_ids),
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(
                error=DatabaseError(
                    message=f"Failed to check inventories for item: {item_id}",
                    cause=e,
                )
            )
        return Success(value=set(result.scalars()))

    async def create_batch(
        self, rows: Sequence[NewInventory]
    ) -> Result[int, DatabaseError]:
        """Insert ``rows`` in a single statement.

        Rows whose (item_id, space_id) already exists are skipped.

        Returns:
            Success with the number of rows created.
        """
        if not rows:
            return Success(value=0)

        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            return Failure(
                error=DatabaseError(
                    message=f"Batch insert is not supported on dialect: {dialect}"
                )
            )

        now = utc_now()
        stmt = (
            insert(InventoryModel)
            .values([self._to_values(row, now) for row in rows])
            .on_conflict_do_nothing(index_elements=["item_id", "space_id"])
            .returning(InventoryModel.id)
        )
        try:
            result = await self.session.execute(stmt)
            created = len(result.all())
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(
                error=DatabaseError(message="Failed to create inventories", cause=e)
            )
        return Success(value=created)

    def _to_values(self, row: NewInventory, now: datetime) -> dict[str, Any]:
        # Core inserts bypass ORM column defaults, so timestamps are explicit.
        return {
            "item_id": row.item_id,
            "item_type": row.item_type,
            "space_id": row.space_id,
            "space_type": row.space_type,
            "name": row.name,
            "code": row.code,
            "sku": row.sku,
            "balance": parse_decimal(row.balance),
            "cost_per_unit": parse_decimal(row.cost_per_unit),
            "status": row.status,
            "notes": row.notes,
            "model_type": row.model_type,
            "parent_type": row.parent_type,
            "created_at": now,
            "updated_at": now,
        }

    def _to_domain(self, inventory_model: InventoryModel) -> InventoryRecord:
        """Convert database model to domain entity."""
        return InventoryRecord(
            id=inventory_model.id,
            item_id=inventory_model.item_id,
            space_id=inventory_model.space_id,
            balance=format_decimal(inventory_model.balance) or "0",
            notes=inventory_model.notes,
            status=inventory_model.status,
            cost_per_unit=format_decimal(inventory_model.cost_per_unit) or "0",
        )
