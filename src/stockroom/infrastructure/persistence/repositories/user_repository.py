"""UserRepository - SQLAlchemy implementation of UserRepositoryProtocol.

Maps between domain User entities and UserModel rows. Every read carries the
soft-delete predicate; emails are compared in lowercase.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.errors import DatabaseError, DomainError
from stockroom.core.result import Failure, Result, Success
from stockroom.domain.entities import AuditFields, CreateUserData, User
from stockroom.domain.errors import EmailAlreadyExistsError
from stockroom.infrastructure.persistence.base import not_deleted
from stockroom.infrastructure.persistence.models import UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepositoryProtocol.

    Does NOT inherit from the protocol (structural typing).

    Example:
        >>> async with db.get_session() as session:
        ...     repo = UserRepository(session)
        ...     result = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: int) -> Result[User | None, DatabaseError]:
        """Find a live user by ID."""
        stmt = select(UserModel).where(UserModel.id == user_id, not_deleted(UserModel))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(
                error=DatabaseError(message=f"Failed to find user: {user_id}", cause=e)
            )
        user_model = result.scalar_one_or_none()
        return Success(value=self._to_domain(user_model) if user_model else None)

    async def find_by_email(self, email: str) -> Result[User | None, DatabaseError]:
        """Find a live user by email (case-insensitive)."""
        stmt = select(UserModel).where(
            UserModel.email == email.lower(), not_deleted(UserModel)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(
                error=DatabaseError(message="Failed to find user by email", cause=e)
            )
        user_model = result.scalar_one_or_none()
        return Success(value=self._to_domain(user_model) if user_model else None)

    async def email_exists(self, email: str) -> Result[bool, DatabaseError]:
        """Check whether a live user already uses ``email``."""
        stmt = (
            select(UserModel.id)
            .where(UserModel.email == email.lower(), not_deleted(UserModel))
            .limit(1)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(
                error=DatabaseError(message="Failed to check email existence", cause=e)
            )
        return Success(value=result.scalar_one_or_none() is not None)

    async def create(self, data: CreateUserData) -> Result[User, DomainError]:
        """Insert a user.

        A unique-index violation (two sign-ups racing for one email) is
        reported as EmailAlreadyExistsError.
        """
        user_model = UserModel(
            name=data.name,
            email=data.email.lower(),
            password_hash=data.password_hash,
        )
        self.session.add(user_model)
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            return Failure(error=EmailAlreadyExistsError(email=data.email))
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=DatabaseError(message="Failed to create user", cause=e))
        return Success(value=self._to_domain(user_model))

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            audit=AuditFields(
                id=user_model.id,
                created_at=user_model.created_at,
                updated_at=user_model.updated_at,
                deleted_at=user_model.deleted_at,
            ),
            name=user_model.name,
            email=user_model.email,
            password_hash=user_model.password_hash,
        )
