"""Authentication service.

Sign-up, sign-in, token refresh and sign-out on top of the token service.

Failure policy:
- Expected outcomes (duplicate email, bad credentials, expired or revoked
  token) come back as Failure values from collaborators and are passed up
  unchanged.
- Anything a collaborator raises is caught at the boundary of each operation
  and returned as DatabaseError, so callers never see raw exceptions.

Architecture:
- Application layer only; collaborators are injected through domain protocols.
"""

import asyncio

from stockroom.core.errors import DatabaseError, DomainError
from stockroom.core.result import Failure, Result, Success
from stockroom.domain.entities import CreateUserData
from stockroom.domain.errors import EmailAlreadyExistsError, InvalidCredentialsError
from stockroom.domain.protocols import (
    AuthUserRepositoryProtocol,
    LoggerProtocol,
    SecretHashingProtocol,
    TokenServiceProtocol,
)
from stockroom.domain.value_objects import TokenPair


class AuthService:
    """Authentication use cases.

    Usage:
        auth_service = AuthService(
            user_repository=AuthUserRepository(UserRepository(session)),
            token_service=get_token_service(),
            password_hasher=get_password_hasher(),
            logger=get_logger(),
        )

        match await auth_service.sign_in(email, password):
            case Success(value=tokens):
                ...
            case Failure(error=error):
                ...
    """

    def __init__(
        self,
        user_repository: AuthUserRepositoryProtocol,
        token_service: TokenServiceProtocol,
        password_hasher: SecretHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            user_repository: User access including password hashes.
            token_service: Issues, rotates and revokes token pairs.
            password_hasher: One-way password hashing.
            logger: Structured logger.
        """
        self._users = user_repository
        self._tokens = token_service
        self._hasher = password_hasher
        self._logger = logger

    async def sign_up(
        self, name: str, email: str, password: str
    ) -> Result[TokenPair, DomainError]:
        """Register a user and issue their first token pair.

        Returns:
            Success(TokenPair), Failure(EmailAlreadyExistsError) or
            Failure(DatabaseError).
        """
        try:
            return await self._sign_up(name, email, password)
        except Exception as e:
            self._logger.error("Sign-up failed unexpectedly", error=e)
            return Failure(error=DatabaseError(message="Failed to sign up user", cause=e))

    async def sign_in(self, email: str, password: str) -> Result[TokenPair, DomainError]:
        """Check credentials and issue a new token pair.

        An unknown email and a wrong password produce the same
        InvalidCredentialsError.
        """
        try:
            return await self._sign_in(email, password)
        except Exception as e:
            self._logger.error("Sign-in failed unexpectedly", error=e)
            return Failure(error=DatabaseError(message="Failed to sign in user", cause=e))

    async def refresh(self, refresh_token: str) -> Result[TokenPair, DomainError]:
        """Rotate a refresh token into a new pair for the same session."""
        try:
            result = await self._tokens.rotate_refresh_token(refresh_token)
        except Exception as e:
            self._logger.error("Token refresh failed unexpectedly", error=e)
            return Failure(error=DatabaseError(message="Failed to refresh token", cause=e))

        match result:
            case Success():
                self._logger.debug("Token pair rotated")
            case Failure(error=error):
                self._logger.info("Token refresh rejected", error_code=error.code.value)
        return result

    async def sign_out(self, refresh_token: str) -> Result[bool, DomainError]:
        """Revoke the session of a currently valid refresh token."""
        try:
            return await self._sign_out(refresh_token)
        except Exception as e:
            self._logger.error("Sign-out failed unexpectedly", error=e)
            return Failure(error=DatabaseError(message="Failed to sign out user", cause=e))

    async def _sign_up(
        self, name: str, email: str, password: str
    ) -> Result[TokenPair, DomainError]:
        match await self._users.email_exists(email):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=True):
                self._logger.info("Sign-up rejected: email taken")
                return Failure(error=EmailAlreadyExistsError(email=email))

        password_hash = await asyncio.to_thread(self._hasher.hash_secret, password)

        match await self._users.create(
            CreateUserData(name=name, email=email, password_hash=password_hash)
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=user):
                pass

        self._logger.info("User signed up", user_id=user.id)
        return await self._tokens.generate_token_pair(user.id)

    async def _sign_in(self, email: str, password: str) -> Result[TokenPair, DomainError]:
        match await self._users.find_by_email(email):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=None):
                self._logger.info("Sign-in rejected")
                return Failure(error=InvalidCredentialsError())
            case Success(value=user):
                pass

        matches = await asyncio.to_thread(
            self._hasher.verify_secret, password, user.password_hash
        )
        if not matches:
            self._logger.info("Sign-in rejected", user_id=user.id)
            return Failure(error=InvalidCredentialsError())

        self._logger.info("User signed in", user_id=user.id)
        return await self._tokens.generate_token_pair(user.id)

    async def _sign_out(self, refresh_token: str) -> Result[bool, DomainError]:
        match await self._tokens.verify_refresh_token(refresh_token):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=payload):
                pass

        match await self._tokens.invalidate_refresh_token(refresh_token):
            case Failure(error=error):
                return Failure(error=error)

        self._logger.info(
            "User signed out", user_id=payload.user_id, session_id=payload.session_id
        )
        return Success(value=True)
