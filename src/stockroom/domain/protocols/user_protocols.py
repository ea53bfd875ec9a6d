"""User capability interfaces.

Repositories are described by what they can do. Authentication gets the one
interface that exposes password hashes; every other consumer gets the
lookup interface, which never does.
"""

from typing import Protocol

from stockroom.core.errors import DomainError
from stockroom.core.result import Result
from stockroom.domain.entities import AuthUser, CreateUserData, User, UserInfo


class UserRepositoryProtocol(Protocol):
    """Persistence operations on users (soft-deleted rows are invisible)."""

    async def find_by_id(self, user_id: int) -> Result[User | None, DomainError]: ...

    async def find_by_email(self, email: str) -> Result[User | None, DomainError]: ...

    async def email_exists(self, email: str) -> Result[bool, DomainError]: ...

    async def create(self, data: CreateUserData) -> Result[User, DomainError]: ...


class AuthUserRepositoryProtocol(Protocol):
    """User access needed by the authentication service."""

    async def create(self, data: CreateUserData) -> Result[AuthUser, DomainError]: ...

    async def find_by_email(
        self, email: str
    ) -> Result[AuthUser | None, DomainError]: ...

    async def email_exists(self, email: str) -> Result[bool, DomainError]: ...


class UserLookupProtocol(Protocol):
    """Read-only user lookup for non-auth consumers."""

    async def find_by_id(self, user_id: int) -> Result[UserInfo | None, DomainError]: ...

    async def find_by_email(
        self, email: str
    ) -> Result[UserInfo | None, DomainError]: ...

    async def exists(self, user_id: int) -> Result[bool, DomainError]: ...
