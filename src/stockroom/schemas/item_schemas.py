"""Item request/response schemas.

Monetary values are accepted as numbers or decimal strings and always
returned as normalized decimal strings ("9.99"), never floats.
"""

from decimal import Decimal
from typing import Any

from pydantic import Field

from stockroom.domain.entities import InventoryRecord, Item, ItemStatus
from stockroom.domain.value_objects import PropagationResult
from stockroom.schemas.common_schemas import CamelModel

Money = Decimal | None


class ItemCreateRequest(CamelModel):
    """Request schema for item creation.

    POST /api/v1/items
    Returns: 201 Created
    """

    name: str = Field(..., min_length=1, max_length=191)
    code: str | None = Field(default=None, max_length=191)
    sku: str | None = Field(default=None, max_length=191)
    description: str | None = None
    notes: str | None = None
    price: Money = Field(default=None, ge=0, max_digits=14, decimal_places=4)
    cost: Money = Field(default=None, ge=0, max_digits=14, decimal_places=4)
    status: ItemStatus = ItemStatus.ACTIVE
    space_id: int | None = Field(default=None, gt=0)
    space_type: str | None = Field(default=None, max_length=64)

    def to_values(self) -> dict[str, Any]:
        return self.model_dump()


class ItemUpdateRequest(CamelModel):
    """Request schema for item updates. Only supplied fields change."""

    name: str | None = Field(default=None, min_length=1, max_length=191)
    code: str | None = Field(default=None, max_length=191)
    sku: str | None = Field(default=None, max_length=191)
    description: str | None = None
    notes: str | None = None
    price: Money = Field(default=None, ge=0, max_digits=14, decimal_places=4)
    cost: Money = Field(default=None, ge=0, max_digits=14, decimal_places=4)
    status: ItemStatus | None = None
    space_id: int | None = Field(default=None, gt=0)
    space_type: str | None = Field(default=None, max_length=64)

    def to_changes(self) -> dict[str, Any]:
        changes = self.model_dump(exclude_unset=True)
        # name and status are NOT NULL columns; an explicit null leaves them as is
        for field_name in ("name", "status"):
            if changes.get(field_name, "") is None:
                del changes[field_name]
        return changes


class ItemResponse(CamelModel):
    """Item representation."""

    id: int
    name: str
    code: str | None
    sku: str | None
    description: str | None
    notes: str | None
    price: str | None
    cost: str | None
    status: ItemStatus
    space_id: int | None
    space_type: str | None

    @classmethod
    def from_domain(cls, item: Item) -> "ItemResponse":
        return cls(
            id=item.id,
            name=item.name,
            code=item.code,
            sku=item.sku,
            description=item.description,
            notes=item.notes,
            price=item.price,
            cost=item.cost,
            status=item.status,
            space_id=item.space_id,
            space_type=item.space_type,
        )


class ItemInventoryResponse(CamelModel):
    """Inventory row embedded in an item listing."""

    space_id: int
    balance: str
    notes: str | None
    status: str
    cost_per_unit: str

    @classmethod
    def from_domain(cls, record: InventoryRecord) -> "ItemInventoryResponse":
        return cls(
            space_id=record.space_id,
            balance=record.balance,
            notes=record.notes,
            status=record.status,
            cost_per_unit=record.cost_per_unit,
        )


class ItemWithInventoriesResponse(ItemResponse):
    """Item plus its inventory rows (GET /api/v1/items?withInventories=true)."""

    inventories: list[ItemInventoryResponse]

    @classmethod
    def from_domain_with_inventories(
        cls, item: Item, records: list[InventoryRecord]
    ) -> "ItemWithInventoriesResponse":
        return cls(
            **ItemResponse.from_domain(item).model_dump(),
            inventories=[ItemInventoryResponse.from_domain(r) for r in records],
        )


class CommerceItemResponse(CamelModel):
    """Storefront view of an item (GET /api/v1/items?type=commerce)."""

    id: int
    name: str
    description: str | None
    price: str | None

    @classmethod
    def from_domain(cls, item: Item) -> "CommerceItemResponse":
        return cls(
            id=item.id,
            name=item.name,
            description=item.description,
            price=item.price,
        )


class PropagationResponse(CamelModel):
    """Outcome of POST /api/v1/items/{id}/inventory."""

    updated_count: int

    @classmethod
    def from_domain(cls, result: PropagationResult) -> "PropagationResponse":
        return cls(updated_count=result.updated_count)
