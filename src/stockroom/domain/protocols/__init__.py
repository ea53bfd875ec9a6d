"""Domain protocols (ports).

Infrastructure adapters implement these protocols structurally, without
inheriting from them.

Usage:
    from stockroom.domain.protocols import TokenServiceProtocol
"""

from stockroom.domain.protocols.inventory_protocols import (
    InventoryRepositoryProtocol,
    InventoryServiceProtocol,
)
from stockroom.domain.protocols.item_repository_protocol import ItemRepositoryProtocol
from stockroom.domain.protocols.key_value_store_protocol import KeyValueStoreProtocol
from stockroom.domain.protocols.logger_protocol import LoggerProtocol
from stockroom.domain.protocols.secret_hashing_protocol import SecretHashingProtocol
from stockroom.domain.protocols.space_lookup_protocol import SpaceLookupProtocol
from stockroom.domain.protocols.token_service_protocol import TokenServiceProtocol
from stockroom.domain.protocols.user_protocols import (
    AuthUserRepositoryProtocol,
    UserLookupProtocol,
    UserRepositoryProtocol,
)

__all__ = [
    "AuthUserRepositoryProtocol",
    "InventoryRepositoryProtocol",
    "InventoryServiceProtocol",
    "ItemRepositoryProtocol",
    "KeyValueStoreProtocol",
    "LoggerProtocol",
    "SecretHashingProtocol",
    "SpaceLookupProtocol",
    "TokenServiceProtocol",
    "UserLookupProtocol",
    "UserRepositoryProtocol",
]
