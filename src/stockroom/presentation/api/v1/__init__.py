"""API v1 routers.

Resources:
    /api/v1/auth       - Sign-up, sign-in, refresh, sign-out
    /api/v1/users      - Current user
    /api/v1/items      - Item CRUD and inventory propagation
    /api/v1/inventory  - Inventory rows per item
"""

from fastapi import APIRouter

from stockroom.core.config import settings
from stockroom.presentation.api.v1.auth import router as auth_router
from stockroom.presentation.api.v1.inventories import router as inventories_router
from stockroom.presentation.api.v1.items import router as items_router
from stockroom.presentation.api.v1.users import router as users_router

# Create combined v1 router
v1_router = APIRouter(prefix=settings.api_v1_prefix)

v1_router.include_router(auth_router)
v1_router.include_router(users_router)
v1_router.include_router(items_router)
v1_router.include_router(inventories_router)

# Export individual routers for testing
__all__ = [
    "v1_router",
    "auth_router",
    "users_router",
    "items_router",
    "inventories_router",
]
