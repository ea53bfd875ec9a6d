"""Error response builder.

The single place where a DomainError becomes an HTTP response. Status is a
pure function of the error code; the body is ``{code, message, details?}``.

Exports:
    error_to_status: Map an ErrorCode to an HTTP status code
    ErrorResponseBuilder: Build JSONResponse objects from domain errors
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from stockroom.core.enums import ErrorCode
from stockroom.core.errors import DomainError

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.AUTHENTICATION_ERROR: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
}


def error_to_status(code: ErrorCode) -> int:
    """Map an error code to its HTTP status (500 for anything unlisted).

    Example:
        >>> error_to_status(ErrorCode.NOT_FOUND)
        404
    """
    return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)


class ErrorResponseBuilder:
    """Build error responses from domain errors.

    Example:
        >>> match result:
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error)
    """

    @staticmethod
    def body(error: DomainError) -> dict[str, Any]:
        """Serialize an error to ``{code, message, details?}``.

        Database failures never expose their cause; only the fixed message
        and code leave the service. ``details`` is omitted when empty.
        """
        content: dict[str, Any] = {
            "code": error.code.value,
            "message": error.message,
        }
        if error.details:
            content["details"] = error.details
        return content

    @staticmethod
    def from_domain_error(error: DomainError) -> JSONResponse:
        """Convert a DomainError to a JSON response with the mapped status."""
        return JSONResponse(
            status_code=error_to_status(error.code),
            content=ErrorResponseBuilder.body(error),
        )
