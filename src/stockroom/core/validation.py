"""Mapping from completed schema validation to ValidationError.

Schemas themselves are plain pydantic models declared next to the routes.
This module only translates their failures into the domain error shape:
``details`` maps a dotted field path to its messages, and anything without a
field location lands under ``"_root"``.

Usage:
    from stockroom.core.validation import validate

    match validate(ItemIdParams, {"id": raw_id}):
        case Success(value=params):
            ...
        case Failure(error=error):
            return error_response(error)
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from stockroom.core.errors import ROOT_ERROR_KEY, ValidationError
from stockroom.core.result import Failure, Result, Success

# Location prefixes FastAPI adds to say where a value came from.
_TRANSPORT_SEGMENTS = frozenset({"body", "query", "path", "header", "cookie"})

# Failures about the payload as a whole; their loc holds a character offset.
_DOCUMENT_ERROR_TYPES = frozenset({"json_invalid"})

M = TypeVar("M", bound=BaseModel)


def field_path(loc: Iterable[int | str]) -> str:
    """Turn a pydantic error location into a dotted field path.

    Args:
        loc: Error location tuple, e.g. ``("body", "address", "city")``.

    Returns:
        ``"address.city"``, or ``"_root"`` when no field is involved.
    """
    parts = [str(part) for part in loc]
    if parts and parts[0] in _TRANSPORT_SEGMENTS:
        parts = parts[1:]
    return ".".join(parts) if parts else ROOT_ERROR_KEY


def validation_error_from_errors(
    errors: Iterable[Mapping[str, Any]],
    message: str = "Validation failed",
) -> ValidationError:
    """Build a ValidationError from pydantic-style error dicts.

    Accepts the output of ``pydantic.ValidationError.errors()`` as well as
    ``fastapi.exceptions.RequestValidationError.errors()``.

    Args:
        errors: Error dicts with ``loc`` and ``msg`` keys.
        message: Top-level message.

    Returns:
        ValidationError with messages grouped per field path.
    """
    details: dict[str, list[str]] = {}
    for error in errors:
        if error.get("type") in _DOCUMENT_ERROR_TYPES:
            path = ROOT_ERROR_KEY
        else:
            path = field_path(error.get("loc", ()))
        details.setdefault(path, []).append(str(error.get("msg", "Invalid value")))
    return ValidationError(message=message, details=details)


def validate(model: type[M], data: Any) -> Result[M, ValidationError]:
    """Validate raw data against a pydantic model.

    Args:
        model: Pydantic model class describing the input.
        data: Raw (already JSON-decoded) input.

    Returns:
        Success with the parsed model, or Failure with ValidationError.
    """
    try:
        return Success(value=model.model_validate(data))
    except PydanticValidationError as e:
        return Failure(error=validation_error_from_errors(e.errors()))
