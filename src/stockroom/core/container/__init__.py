"""Container module - composition root.

Every collaborator is constructed here and handed to its consumer
explicitly; there is no global registry to look services up from.

- infrastructure: app-scoped singletons (database, Redis, hashing, tokens,
  logging) and the request-scoped database session
- services: request-scoped repositories and application services

    from stockroom.core.container import get_auth_service, get_logger
"""

from stockroom.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_key_value_store,
    get_logger,
    get_password_hasher,
    get_redis_client,
    get_token_service,
)
from stockroom.core.container.services import (
    get_auth_service,
    get_inventory_service,
    get_item_repository,
    get_user_lookup,
)

__all__ = [
    "get_auth_service",
    "get_database",
    "get_db_session",
    "get_inventory_service",
    "get_item_repository",
    "get_key_value_store",
    "get_logger",
    "get_password_hasher",
    "get_redis_client",
    "get_token_service",
    "get_user_lookup",
]
