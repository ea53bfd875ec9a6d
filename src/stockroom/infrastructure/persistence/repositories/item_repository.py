"""ItemRepository - SQLAlchemy implementation of ItemRepositoryProtocol.

Deletion is soft: ``deleted_at`` is stamped and the status archived. Every
read filters deleted rows out explicitly.
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.errors import DatabaseError, DomainError, NotFoundError
from stockroom.core.result import Failure, Result, Success
from stockroom.domain.entities import AuditFields, Item, ItemQuery, ItemStatus
from stockroom.infrastructure.persistence.base import not_deleted, utc_now
from stockroom.infrastructure.persistence.mappers import format_decimal, parse_decimal
from stockroom.infrastructure.persistence.models import ItemModel

# Columns callers may set through create/update.
_WRITABLE_FIELDS = frozenset(
    {
        "name",
        "code",
        "sku",
        "description",
        "notes",
        "price",
        "cost",
        "status",
        "space_id",
        "space_type",
    }
)
_DECIMAL_FIELDS = frozenset({"price", "cost"})

_SORT_COLUMNS = {
    "id": ItemModel.id,
    "name": ItemModel.name,
    "price": ItemModel.price,
    "created_at": ItemModel.created_at,
}


_LIKE_ESCAPE = "\\"


def _contains_pattern(search: str) -> str:
    """LIKE pattern matching ``search`` literally anywhere in a value."""
    escaped = (
        search.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _column_values(data: Mapping[str, Any]) -> dict[str, Any]:
    """Keep writable fields and convert them to column types."""
    values: dict[str, Any] = {}
    for field_name, value in data.items():
        if field_name not in _WRITABLE_FIELDS:
            continue
        if field_name in _DECIMAL_FIELDS:
            value = parse_decimal(value)
        elif isinstance(value, ItemStatus):
            value = value.value
        values[field_name] = value
    return values


class ItemRepository:
    """SQLAlchemy implementation of ItemRepositoryProtocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, data: Mapping[str, Any]) -> Result[Item, DatabaseError]:
        """Insert an item.

        Args:
            data: Field values keyed by attribute name; ``name`` is required.
        """
        item_model = ItemModel(**_column_values(data))
        self.session.add(item_model)
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=DatabaseError(message="Failed to create item", cause=e))
        return Success(value=self._to_domain(item_model))

    async def find_by_id(self, item_id: int) -> Result[Item | None, DatabaseError]:
        """Find a live item by ID."""
        try:
            item_model = await self._get_live(item_id)
        except SQLAlchemyError as e:
            return Failure(
                error=DatabaseError(message=f"Failed to find item: {item_id}", cause=e)
            )
        return Success(value=self._to_domain(item_model) if item_model else None)

    async def find_all(self, query: ItemQuery) -> Result[list[Item], DatabaseError]:
        """List live items in a space with search, status filter and paging."""
        stmt = select(ItemModel).where(
            ItemModel.space_id == query.space_id,
            ItemModel.status == query.status.value,
            not_deleted(ItemModel),
        )
        if query.search:
            pattern = _contains_pattern(query.search)
            stmt = stmt.where(
                or_(
                    ItemModel.name.ilike(pattern, escape=_LIKE_ESCAPE),
                    ItemModel.code.ilike(pattern, escape=_LIKE_ESCAPE),
                    ItemModel.sku.ilike(pattern, escape=_LIKE_ESCAPE),
                )
            )

        sort_column = _SORT_COLUMNS.get(query.sort_by, ItemModel.id)
        order = sort_column.desc() if query.sort_order == "desc" else sort_column.asc()
        stmt = (
            stmt.order_by(order, ItemModel.id.asc())
            .offset((query.page - 1) * query.limit)
            .limit(query.limit)
        )

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(error=DatabaseError(message="Failed to list items", cause=e))
        return Success(value=[self._to_domain(model) for model in result.scalars()])

    async def update(
        self, item_id: int, changes: Mapping[str, Any]
    ) -> Result[Item, DomainError]:
        """Apply ``changes`` to a live item."""
        try:
            item_model = await self._get_live(item_id)
            if item_model is None:
                return Failure(error=NotFoundError(resource="Item", resource_id=str(item_id)))
            for field_name, value in _column_values(changes).items():
                setattr(item_model, field_name, value)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(
                error=DatabaseError(message=f"Failed to update item: {item_id}", cause=e)
            )
        return Success(value=self._to_domain(item_model))

    async def delete(self, item_id: int) -> Result[None, DomainError]:
        """Soft delete a live item (sets deleted_at, archives it)."""
        try:
            item_model = await self._get_live(item_id)
            if item_model is None:
                return Failure(error=NotFoundError(resource="Item", resource_id=str(item_id)))
            item_model.deleted_at = utc_now()
            item_model.status = ItemStatus.ARCHIVED.value
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(
                error=DatabaseError(message=f"Failed to delete item: {item_id}", cause=e)
            )
        return Success(value=None)

    async def _get_live(self, item_id: int) -> ItemModel | None:
        stmt = select(ItemModel).where(ItemModel.id == item_id, not_deleted(ItemModel))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, item_model: ItemModel) -> Item:
        """Convert database model to domain entity."""
        return Item(
            audit=AuditFields(
                id=item_model.id,
                created_at=item_model.created_at,
                updated_at=item_model.updated_at,
                deleted_at=item_model.deleted_at,
            ),
            name=item_model.name,
            code=item_model.code,
            sku=item_model.sku,
            description=item_model.description,
            notes=item_model.notes,
            price=format_decimal(item_model.price),
            cost=format_decimal(item_model.cost),
            status=ItemStatus(item_model.status),
            space_id=item_model.space_id,
            space_type=item_model.space_type,
        )
