"""Item database model."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stockroom.infrastructure.persistence.base import (
    BaseModel,
    IdType,
    SoftDeleteMixin,
    TimestampMixin,
)


class ItemModel(SoftDeleteMixin, TimestampMixin, BaseModel):
    """Product or stock-keeping item.

    Fields:
        price, cost: NUMERIC(14, 4), exposed to the domain as decimal strings
        status: active / inactive / archived
        space_id: Assigned space (nullable until placed)
    """

    __tablename__ = "items"

    name: Mapped[str] = mapped_column(String(191), nullable=False, index=True)
    code: Mapped[str | None] = mapped_column(String(191), nullable=True)
    sku: Mapped[str | None] = mapped_column(String(191), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(14, 4), nullable=True)
    cost: Mapped[Decimal | None] = mapped_column(Numeric(14, 4), nullable=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="active")
    space_id: Mapped[int | None] = mapped_column(
        IdType, ForeignKey("spaces.id"), nullable=True, index=True
    )
    space_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
