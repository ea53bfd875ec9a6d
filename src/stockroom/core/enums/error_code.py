"""Domain-level error codes (machine-readable).

Values are part of the public HTTP contract: clients branch on ``code``
instead of parsing messages, so a value never changes once released.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes carried by every DomainError."""

    # Input errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Resource errors
    NOT_FOUND = "NOT_FOUND"

    # Infrastructure errors
    DATABASE_ERROR = "DATABASE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Authentication errors
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    INVALID_TOKEN = "INVALID_TOKEN"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    UNAUTHORIZED = "UNAUTHORIZED"
