"""Users resource router.

Endpoints:
    GET /api/v1/users/me - Current user
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from stockroom.core.container import get_user_lookup
from stockroom.core.errors import NotFoundError
from stockroom.core.result import Failure, Success
from stockroom.domain.protocols import UserLookupProtocol
from stockroom.presentation.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from stockroom.presentation.api.v1.errors import ErrorResponseBuilder
from stockroom.schemas.auth_schemas import UserResponse
from stockroom.schemas.common_schemas import DataResponse, ErrorResponse

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/me",
    response_model=DataResponse[UserResponse],
    responses={
        401: {"description": "Not authenticated", "model": ErrorResponse},
        404: {"description": "User no longer exists", "model": ErrorResponse},
    },
    summary="Current user",
)
async def get_me(
    current_user: CurrentUser = Depends(get_current_user),
    user_lookup: UserLookupProtocol = Depends(get_user_lookup),
) -> DataResponse[UserResponse] | JSONResponse:
    """Return the user the access token was issued to."""
    match await user_lookup.find_by_id(current_user.user_id):
        case Success(value=None):
            return ErrorResponseBuilder.from_domain_error(
                NotFoundError(resource="User", resource_id=str(current_user.user_id))
            )
        case Success(value=user):
            return DataResponse(data=UserResponse.from_domain(user))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
