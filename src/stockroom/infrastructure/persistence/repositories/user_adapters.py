"""Narrow user views over UserRepository.

AuthUserRepository hands the authentication service the password hash it
needs; UserLookup serves everyone else and strips it.
"""

from stockroom.core.errors import DomainError
from stockroom.core.result import Failure, Result, Success
from stockroom.domain.entities import AuthUser, CreateUserData, UserInfo
from stockroom.domain.protocols import UserRepositoryProtocol


class AuthUserRepository:
    """AuthUserRepositoryProtocol adapter over a user repository."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self._users = user_repository

    async def create(self, data: CreateUserData) -> Result[AuthUser, DomainError]:
        match await self._users.create(data):
            case Success(value=user):
                return Success(value=user.to_auth_user())
            case Failure(error=error):
                return Failure(error=error)

    async def find_by_email(self, email: str) -> Result[AuthUser | None, DomainError]:
        match await self._users.find_by_email(email):
            case Success(value=None):
                return Success(value=None)
            case Success(value=user):
                return Success(value=user.to_auth_user())
            case Failure(error=error):
                return Failure(error=error)

    async def email_exists(self, email: str) -> Result[bool, DomainError]:
        return await self._users.email_exists(email)


class UserLookup:
    """UserLookupProtocol adapter: user data without credentials."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self._users = user_repository

    async def find_by_id(self, user_id: int) -> Result[UserInfo | None, DomainError]:
        match await self._users.find_by_id(user_id):
            case Success(value=None):
                return Success(value=None)
            case Success(value=user):
                return Success(value=user.to_user_info())
            case Failure(error=error):
                return Failure(error=error)

    async def find_by_email(self, email: str) -> Result[UserInfo | None, DomainError]:
        match await self._users.find_by_email(email):
            case Success(value=None):
                return Success(value=None)
            case Success(value=user):
                return Success(value=user.to_user_info())
            case Failure(error=error):
                return Failure(error=error)

    async def exists(self, user_id: int) -> Result[bool, DomainError]:
        match await self._users.find_by_id(user_id):
            case Success(value=user):
                return Success(value=user is not None)
            case Failure(error=error):
                return Failure(error=error)
