"""Core shared kernel.

Foundational pieces used across all layers:
- Result types for railway-oriented programming
- Error taxonomy and stable error codes
- Validation-failure mapping

The core module has NO dependencies on other application layers
(the container subpackage is the composition root and is the exception).
"""

from stockroom.core.enums import ErrorCode
from stockroom.core.errors import (
    DatabaseError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from stockroom.core.result import Failure, Result, Success, err, ok

__all__ = [
    "DatabaseError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
    "err",
    "ok",
]
