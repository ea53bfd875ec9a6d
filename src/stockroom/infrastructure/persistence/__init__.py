"""Persistence adapters (SQLAlchemy async)."""

from stockroom.infrastructure.persistence.base import BaseModel, not_deleted
from stockroom.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
    "not_deleted",
]
