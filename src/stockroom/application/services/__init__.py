"""Application services."""

from stockroom.application.services.auth_service import AuthService
from stockroom.application.services.inventory_service import InventoryService

__all__ = [
    "AuthService",
    "InventoryService",
]
