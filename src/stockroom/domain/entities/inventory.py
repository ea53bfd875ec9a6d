"""Inventory entities.

One inventory row exists per (item, space) pair. Rows created by propagation
carry fixed type tags marking them as item-to-space propagation edges.
"""

from dataclasses import dataclass

ITEM_TYPE_TAG = "ITM"
MODEL_TYPE_TAG = "SUP"
PARENT_TYPE_TAG = "IVT"
DEFAULT_SPACE_TYPE = "SPACE"


@dataclass(frozen=True, slots=True, kw_only=True)
class InventoryRecord:
    """Stored inventory row as returned to callers.

    Attributes:
        id: Inventory identifier.
        item_id: Item this row tracks.
        space_id: Space holding the stock.
        balance: Quantity on hand (decimal string).
        notes: Notes copied from the item.
        status: Status copied from the item.
        cost_per_unit: Unit cost (decimal string).
    """

    id: int
    item_id: int
    space_id: int
    balance: str
    notes: str | None
    status: str
    cost_per_unit: str


@dataclass(frozen=True, slots=True, kw_only=True)
class NewInventory:
    """Row to insert during propagation."""

    item_id: int
    space_id: int
    name: str
    code: str | None
    sku: str | None
    status: str
    notes: str | None
    balance: str = "0"
    cost_per_unit: str = "0"
    item_type: str = ITEM_TYPE_TAG
    space_type: str = DEFAULT_SPACE_TYPE
    model_type: str = MODEL_TYPE_TAG
    parent_type: str = PARENT_TYPE_TAG
