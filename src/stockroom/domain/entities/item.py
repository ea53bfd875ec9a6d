"""Item entity and its read-only propagation projection."""

from dataclasses import dataclass
from enum import Enum

from stockroom.domain.entities.audit import AuditFields


class ItemStatus(str, Enum):
    """Lifecycle status of an item."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ARCHIVED = "archived"


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemForPropagation:
    """Fields of an item that inventory propagation copies.

    Decimal values are normalized strings ("9.99"), never floats.
    """

    id: int
    name: str
    code: str | None
    sku: str | None
    cost: str | None
    status: str
    notes: str | None
    space_id: int | None
    space_type: str | None


@dataclass(frozen=True, slots=True, kw_only=True)
class Item:
    """Product or stock-keeping item.

    Attributes:
        audit: Identity and lifecycle timestamps.
        name: Item name.
        code: Internal code.
        sku: Stock keeping unit.
        description: Long description.
        notes: Free-form notes.
        price: Selling price (decimal string).
        cost: Unit cost (decimal string), copied to inventories.
        status: Lifecycle status.
        space_id: Space the item is assigned to, None if unassigned.
        space_type: Type tag of that space.
    """

    audit: AuditFields
    name: str
    code: str | None = None
    sku: str | None = None
    description: str | None = None
    notes: str | None = None
    price: str | None = None
    cost: str | None = None
    status: ItemStatus = ItemStatus.ACTIVE
    space_id: int | None = None
    space_type: str | None = None

    @property
    def id(self) -> int:
        return self.audit.id

    def for_propagation(self) -> ItemForPropagation:
        """Project the item for inventory propagation."""
        return ItemForPropagation(
            id=self.audit.id,
            name=self.name,
            code=self.code,
            sku=self.sku,
            cost=self.cost,
            status=self.status.value,
            notes=self.notes,
            space_id=self.space_id,
            space_type=self.space_type,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemQuery:
    """Filters for listing items within a space."""

    space_id: int
    page: int = 1
    limit: int = 10
    search: str | None = None
    status: ItemStatus = ItemStatus.ACTIVE
    sort_by: str = "id"
    sort_order: str = "asc"
