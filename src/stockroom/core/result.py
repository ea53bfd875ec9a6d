"""Result types for railway-oriented programming.

Every fallible operation in the service returns a Result instead of raising.
Expected failures (bad credentials, duplicate email, missing rows) travel as
Failure values up to the HTTP boundary, where they are translated once.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return err("Division by zero")
        return ok(a / b)

    match divide(10, 2):
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(error=error):
            print(f"Error: {error}")

Reading ``.value`` from a Failure (or ``.error`` from a Success) is a type
error: each variant only has the slot it owns.
"""

from dataclasses import dataclass
from typing import Generic, Literal, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value (may be None).
    """

    value: T

    def is_ok(self) -> Literal[True]:
        """Return True, this is the Ok variant."""
        return True

    def is_err(self) -> Literal[False]:
        """Return False, this is not the Err variant."""
        return False


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    def is_ok(self) -> Literal[False]:
        """Return False, this is not the Ok variant."""
        return False

    def is_err(self) -> Literal[True]:
        """Return True, this is the Err variant."""
        return True


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]


def ok(value: T) -> Success[T]:
    """Wrap a value in the Ok variant."""
    return Success(value=value)


def err(error: E) -> Failure[E]:
    """Wrap an error in the Err variant."""
    return Failure(error=error)
