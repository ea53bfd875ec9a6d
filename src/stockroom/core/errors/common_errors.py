"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures (field path -> messages)
- NotFoundError: Resource not found
- DatabaseError: Relational or key-value store failure

Usage:
    from stockroom.core.errors import NotFoundError
    from stockroom.core.result import Failure

    return Failure(error=NotFoundError(resource="Item", resource_id="42"))
"""

from dataclasses import dataclass, field

from stockroom.core.enums import ErrorCode
from stockroom.core.errors.domain_error import DomainError

# Key used in ValidationError.details for failures not tied to a field.
ROOT_ERROR_KEY = "_root"


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        details: Dotted field path -> list of messages. Schema-level
            failures are keyed by ``"_root"``.
    """

    code: ErrorCode = ErrorCode.VALIDATION_ERROR
    message: str = "Validation failed"
    details: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    The message is always ``"{resource} with id '{resource_id}' not found"``.

    Attributes:
        resource: Type of resource (Item, Space, User, ...).
        resource_id: Identifier that was looked up.
    """

    code: ErrorCode = ErrorCode.NOT_FOUND
    message: str = ""
    resource: str
    resource_id: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"{self.resource} with id '{self.resource_id}' not found",
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(DomainError):
    """Storage failure (relational database or key-value store).

    The message is generic and safe to show to clients; the underlying
    exception is kept in ``cause`` for logging only.

    Attributes:
        cause: Original exception, never rendered.
    """

    code: ErrorCode = ErrorCode.DATABASE_ERROR
    message: str = "Database operation failed"
    cause: BaseException | None = field(default=None, compare=False, repr=False)
