"""Base model and mixins for all database tables.

This module provides:
- BaseModel: Declarative base (integer id, created_at)
- TimestampMixin: adds updated_at
- SoftDeleteMixin: adds nullable deleted_at
- not_deleted(): the soft-delete predicate every repository read applies

There is no ORM-level default scope for soft deletion. Each query states
``where(not_deleted(Model))`` explicitly so the filter is visible and testable.

Usage:
    class ItemModel(SoftDeleteMixin, TimestampMixin, BaseModel):
        __tablename__ = "items"
        name: Mapped[str]

    stmt = select(ItemModel).where(ItemModel.id == item_id, not_deleted(ItemModel))
"""

from datetime import UTC, datetime
from sqlalchemy import BigInteger, ColumnElement, DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# BIGINT on PostgreSQL, INTEGER on SQLite so autoincrement keeps working.
IdType = BigInteger().with_variant(Integer(), "sqlite")


def utc_now() -> datetime:
    """Current time, timezone-aware UTC."""
    return datetime.now(UTC)


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: autoincrement integer primary key
    - created_at: insertion timestamp (UTC)

    Domain entities never inherit from this; repositories map rows to
    entities explicitly.
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Adds ``updated_at``, refreshed on every UPDATE."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
        server_default=func.now(),
    )


class SoftDeleteMixin:
    """Adds the nullable ``deleted_at`` soft-delete marker."""

    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        index=True,
    )


def not_deleted(model: type[SoftDeleteMixin]) -> ColumnElement[bool]:
    """Predicate excluding soft-deleted rows of ``model``."""
    return model.deleted_at.is_(None)
