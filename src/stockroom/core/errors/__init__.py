"""Core error types.

Re-exports the base DomainError, the cross-cutting variants, and ErrorCode
so callers only need one import path.
"""

from stockroom.core.enums import ErrorCode
from stockroom.core.errors.common_errors import (
    ROOT_ERROR_KEY,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from stockroom.core.errors.domain_error import DomainError

__all__ = [
    "ROOT_ERROR_KEY",
    "DatabaseError",
    "DomainError",
    "ErrorCode",
    "NotFoundError",
    "ValidationError",
]
