"""Inventory database model.

One row per (item, space). The unique constraint is the backstop for
concurrent propagation runs: both may see a space as missing, only one
insert lands.
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from stockroom.infrastructure.persistence.base import (
    BaseModel,
    IdType,
    SoftDeleteMixin,
    TimestampMixin,
)


class InventoryModel(SoftDeleteMixin, TimestampMixin, BaseModel):
    """Stock of one item held in one space."""

    __tablename__ = "inventories"

    item_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("items.id"), nullable=False, index=True
    )
    item_type: Mapped[str] = mapped_column(String(16), nullable=False)
    space_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("spaces.id"), nullable=False, index=True
    )
    space_type: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(191), nullable=False)
    code: Mapped[str | None] = mapped_column(String(191), nullable=True)
    sku: Mapped[str | None] = mapped_column(String(191), nullable=True)
    balance: Mapped[Decimal] = mapped_column(Numeric(14, 4), nullable=False)
    cost_per_unit: Mapped[Decimal] = mapped_column(Numeric(14, 4), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    model_type: Mapped[str] = mapped_column(String(16), nullable=False)
    parent_type: Mapped[str] = mapped_column(String(16), nullable=False)

    __table_args__ = (
        UniqueConstraint("item_id", "space_id", name="uq_inventories_item_space"),
    )
