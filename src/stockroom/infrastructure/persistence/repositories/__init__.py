"""SQLAlchemy repository implementations."""

from stockroom.infrastructure.persistence.repositories.inventory_repository import (
    InventoryRepository,
)
from stockroom.infrastructure.persistence.repositories.item_repository import (
    ItemRepository,
)
from stockroom.infrastructure.persistence.repositories.space_lookup_repository import (
    SpaceLookupRepository,
)
from stockroom.infrastructure.persistence.repositories.user_adapters import (
    AuthUserRepository,
    UserLookup,
)
from stockroom.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "AuthUserRepository",
    "InventoryRepository",
    "ItemRepository",
    "SpaceLookupRepository",
    "UserLookup",
    "UserRepository",
]
