"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for ALL application errors. Errors flow through
the system as data (inside Failure), they are never raised.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Frozen dataclass hierarchy, every variant exposes ``code`` and ``message``
- The HTTP boundary maps ``code`` to a status and renders
  ``{code, message, details?}``

Usage:
    from dataclasses import dataclass

    from stockroom.core.enums import ErrorCode
    from stockroom.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        code: ErrorCode = ErrorCode.VALIDATION_ERROR
        message: str = "Something is off"
"""

from dataclasses import dataclass
from typing import Any

from stockroom.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum, stable string value).
        message: Human-readable error message.
        details: Optional structured context rendered to clients.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
