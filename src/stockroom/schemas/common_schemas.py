"""Common schemas used across multiple API endpoints.

- CamelModel: base for every HTTP schema (camelCase on the wire, snake_case
  in Python; either is accepted on input)
- DataResponse: the ``{"data": ...}`` success envelope
- ErrorResponse: the ``{code, message, details?}`` error body
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema serializing field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DataResponse(CamelModel, Generic[T]):
    """Success envelope.

    Attributes:
        data: Response payload.
    """

    data: T


class ErrorResponse(BaseModel):
    """Error body shared by every failing endpoint."""

    code: str = Field(..., description="Stable error code", examples=["NOT_FOUND"])
    message: str = Field(..., description="Human-readable message")
    details: dict[str, list[str]] | None = Field(
        default=None,
        description="Field-level messages keyed by dotted field path",
    )


class SuccessResponse(CamelModel):
    """Acknowledgement for operations without a resource to return."""

    success: bool = True
    message: str | None = None
