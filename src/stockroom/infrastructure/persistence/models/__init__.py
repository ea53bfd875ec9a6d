"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from stockroom.infrastructure.persistence.models.inventory import InventoryModel
from stockroom.infrastructure.persistence.models.item import ItemModel
from stockroom.infrastructure.persistence.models.space import SpaceModel
from stockroom.infrastructure.persistence.models.user import UserModel

__all__ = [
    "InventoryModel",
    "ItemModel",
    "SpaceModel",
    "UserModel",
]
