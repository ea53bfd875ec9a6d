"""Core enumerations."""

from stockroom.core.enums.environment import Environment
from stockroom.core.enums.error_code import ErrorCode

__all__ = [
    "Environment",
    "ErrorCode",
]
