"""Global exception handlers for FastAPI application.

Everything that escapes a route is converted to the same error body the
routes return for Failure results.

Handlers:
    http_exception_handler: HTTPException (auth dependency, 404 routes, ...)
    validation_exception_handler: RequestValidationError -> 400 VALIDATION_ERROR
    generic_exception_handler: anything else -> 500 INTERNAL_ERROR

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stockroom.core.container import get_logger
from stockroom.core.enums import ErrorCode
from stockroom.core.validation import validation_error_from_errors
from stockroom.presentation.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)

_CODE_BY_STATUS: dict[int, ErrorCode] = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.UNAUTHORIZED,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
}


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to the standard error body.

    A dict ``detail`` carrying ``code`` and ``message`` is passed through;
    plain string details get a code derived from the status.
    """
    # Type narrowing: registered only for HTTPException
    assert isinstance(exc, StarletteHTTPException)

    if isinstance(exc.detail, dict) and "code" in exc.detail:
        content = exc.detail
    else:
        code = _CODE_BY_STATUS.get(exc.status_code, ErrorCode.INTERNAL_ERROR)
        content = {"code": code.value, "message": str(exc.detail)}

    # Preserve any headers from HTTPException (e.g., WWW-Authenticate)
    headers = getattr(exc, "headers", None)

    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert request validation failures to 400 VALIDATION_ERROR.

    Example body:
        {
          "code": "VALIDATION_ERROR",
          "message": "Validation failed",
          "details": {"email": ["value is not a valid email address: ..."]}
        }
    """
    # Type narrowing: registered only for RequestValidationError
    assert isinstance(exc, RequestValidationError)

    error = validation_error_from_errors(exc.errors())
    return ErrorResponseBuilder.from_domain_error(error)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and returns a generic 500 so stack traces and driver
    messages never reach API consumers.
    """
    get_logger().error(
        "Unhandled exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": ErrorCode.INTERNAL_ERROR.value,
            "message": "An unexpected error occurred",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
