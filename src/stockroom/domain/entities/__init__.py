"""Domain entities."""

from stockroom.domain.entities.audit import AuditFields, is_deleted, mark_deleted
from stockroom.domain.entities.inventory import InventoryRecord, NewInventory
from stockroom.domain.entities.item import (
    Item,
    ItemForPropagation,
    ItemQuery,
    ItemStatus,
)
from stockroom.domain.entities.space import SpaceInfo
from stockroom.domain.entities.user import AuthUser, CreateUserData, User, UserInfo

__all__ = [
    "AuditFields",
    "AuthUser",
    "CreateUserData",
    "InventoryRecord",
    "Item",
    "ItemForPropagation",
    "ItemQuery",
    "ItemStatus",
    "NewInventory",
    "SpaceInfo",
    "User",
    "UserInfo",
    "is_deleted",
    "mark_deleted",
]
