"""Authentication domain errors.

Each variant carries a fixed code and a default message. Sign-in failures
deliberately share one variant whether the email is unknown or the password
is wrong, so responses never reveal which emails are registered.
"""

from dataclasses import dataclass

from stockroom.core.enums import ErrorCode
from stockroom.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Generic authentication failure."""

    code: ErrorCode = ErrorCode.AUTHENTICATION_ERROR
    message: str = "Authentication failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidCredentialsError(DomainError):
    """Unknown email or wrong password."""

    code: ErrorCode = ErrorCode.INVALID_CREDENTIALS
    message: str = "Invalid email or password"


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenExpiredError(DomainError):
    """Token signature is valid but ``exp`` has passed."""

    code: ErrorCode = ErrorCode.TOKEN_EXPIRED
    message: str = "Token has expired"


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidTokenError(DomainError):
    """Malformed, tampered, revoked or superseded token."""

    code: ErrorCode = ErrorCode.INVALID_TOKEN
    message: str = "Invalid token"


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailAlreadyExistsError(DomainError):
    """Sign-up attempted with a registered email.

    Attributes:
        email: The email that is already taken.
    """

    code: ErrorCode = ErrorCode.EMAIL_ALREADY_EXISTS
    message: str = ""
    email: str

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(
                self, "message", f"Email '{self.email}' is already registered"
            )
