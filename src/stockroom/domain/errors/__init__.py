"""Domain-specific error variants."""

from stockroom.domain.errors.auth_errors import (
    AuthenticationError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
)

__all__ = [
    "AuthenticationError",
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "TokenExpiredError",
]
