"""Space database model.

Spaces form a tree through the self-referencing ``parent_id``.
"""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stockroom.infrastructure.persistence.base import (
    BaseModel,
    IdType,
    SoftDeleteMixin,
    TimestampMixin,
)


class SpaceModel(SoftDeleteMixin, TimestampMixin, BaseModel):
    """Physical or logical location that holds stock."""

    __tablename__ = "spaces"

    name: Mapped[str] = mapped_column(String(191), nullable=False)
    parent_id: Mapped[int | None] = mapped_column(
        IdType, ForeignKey("spaces.id"), nullable=True, index=True
    )
    space_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="active")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
