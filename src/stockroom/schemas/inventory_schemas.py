"""Inventory response schemas."""

from stockroom.domain.entities import InventoryRecord
from stockroom.schemas.common_schemas import CamelModel


class InventoryResponse(CamelModel):
    """Stock of one item in one space."""

    id: int
    item_id: int
    space_id: int
    balance: str
    notes: str | None
    status: str
    cost_per_unit: str

    @classmethod
    def from_domain(cls, record: InventoryRecord) -> "InventoryResponse":
        return cls(
            id=record.id,
            item_id=record.item_id,
            space_id=record.space_id,
            balance=record.balance,
            notes=record.notes,
            status=record.status,
            cost_per_unit=record.cost_per_unit,
        )
