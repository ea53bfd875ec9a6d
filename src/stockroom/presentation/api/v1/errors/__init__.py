"""Error translation for API v1."""

from stockroom.presentation.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
    error_to_status,
)
from stockroom.presentation.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "ErrorResponseBuilder",
    "error_to_status",
    "register_exception_handlers",
]
