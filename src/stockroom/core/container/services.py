"""Repository and service dependency factories.

Request-scoped: each request gets fresh repositories sharing the request's
database session, and services built from them plus the app-scoped
singletons.

Usage:
    @router.post("/auth/signin")
    async def sign_in(
        auth_service: AuthService = Depends(get_auth_service),
    ):
        ...
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_password_hasher,
    get_token_service,
)
from stockroom.domain.protocols import (
    LoggerProtocol,
    SecretHashingProtocol,
    TokenServiceProtocol,
)

if TYPE_CHECKING:
    from stockroom.application.services import AuthService, InventoryService
    from stockroom.infrastructure.persistence.repositories import (
        ItemRepository,
        UserLookup,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_item_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ItemRepository":
    """Get item repository (request-scoped).

    Args:
        session: Database session for request duration.

    Returns:
        ItemRepository instance.
    """
    from stockroom.infrastructure.persistence.repositories import ItemRepository

    return ItemRepository(session=session)


async def get_user_lookup(
    session: AsyncSession = Depends(get_db_session),
) -> "UserLookup":
    """Get credential-free user lookup (request-scoped)."""
    from stockroom.infrastructure.persistence.repositories import (
        UserLookup,
        UserRepository,
    )

    return UserLookup(UserRepository(session=session))


# ============================================================================
# Service Factories (Request-Scoped)
# ============================================================================


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenServiceProtocol = Depends(get_token_service),
    password_hasher: SecretHashingProtocol = Depends(get_password_hasher),
    logger: LoggerProtocol = Depends(get_logger),
) -> "AuthService":
    """Get authentication service (request-scoped).

    The service sees users only through AuthUserRepository, the one view
    that exposes password hashes.
    """
    from stockroom.application.services import AuthService
    from stockroom.infrastructure.persistence.repositories import (
        AuthUserRepository,
        UserRepository,
    )

    return AuthService(
        user_repository=AuthUserRepository(UserRepository(session=session)),
        token_service=token_service,
        password_hasher=password_hasher,
        logger=logger,
    )


async def get_inventory_service(
    session: AsyncSession = Depends(get_db_session),
    logger: LoggerProtocol = Depends(get_logger),
) -> "InventoryService":
    """Get inventory service (request-scoped)."""
    from stockroom.application.services import InventoryService
    from stockroom.infrastructure.persistence.repositories import (
        InventoryRepository,
        SpaceLookupRepository,
    )

    return InventoryService(
        space_lookup=SpaceLookupRepository(session=session),
        inventory_repository=InventoryRepository(session=session),
        logger=logger,
    )
