"""Auth resource router.

Endpoints:
    POST /api/v1/auth/signup   - Create account (201, token pair)
    POST /api/v1/auth/signin   - Sign in (token pair)
    POST /api/v1/auth/refresh  - Rotate refresh token (token pair)
    POST /api/v1/auth/signout  - Revoke the refresh token's session
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from stockroom.application.services import AuthService
from stockroom.core.container import get_auth_service
from stockroom.core.result import Failure, Success
from stockroom.presentation.api.v1.errors import ErrorResponseBuilder
from stockroom.schemas.auth_schemas import (
    RefreshTokenRequest,
    SignInRequest,
    SignUpRequest,
    TokenPairResponse,
)
from stockroom.schemas.common_schemas import (
    DataResponse,
    ErrorResponse,
    SuccessResponse,
)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=DataResponse[TokenPairResponse],
    responses={
        400: {"description": "Validation failed or email taken", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Sign up",
)
async def sign_up(
    data: SignUpRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> DataResponse[TokenPairResponse] | JSONResponse:
    """Create an account and return its first token pair."""
    match await auth_service.sign_up(data.name, str(data.email), data.password):
        case Success(value=tokens):
            return DataResponse(data=TokenPairResponse.from_domain(tokens))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@router.post(
    "/signin",
    response_model=DataResponse[TokenPairResponse],
    responses={
        400: {"description": "Invalid email or password", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Sign in",
)
async def sign_in(
    data: SignInRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> DataResponse[TokenPairResponse] | JSONResponse:
    """Exchange email and password for a token pair."""
    match await auth_service.sign_in(str(data.email), data.password):
        case Success(value=tokens):
            return DataResponse(data=TokenPairResponse.from_domain(tokens))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@router.post(
    "/refresh",
    response_model=DataResponse[TokenPairResponse],
    responses={
        401: {"description": "Refresh token expired or invalid", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Refresh tokens",
)
async def refresh(
    data: RefreshTokenRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> DataResponse[TokenPairResponse] | JSONResponse:
    """Rotate a refresh token. The presented token stops working."""
    match await auth_service.refresh(data.refresh_token):
        case Success(value=tokens):
            return DataResponse(data=TokenPairResponse.from_domain(tokens))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@router.post(
    "/signout",
    response_model=SuccessResponse,
    responses={
        401: {"description": "Refresh token invalid or revoked", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Sign out",
)
async def sign_out(
    data: RefreshTokenRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> SuccessResponse | JSONResponse:
    """Revoke the session of a refresh token."""
    match await auth_service.sign_out(data.refresh_token):
        case Success():
            return SuccessResponse(message="Successfully signed out")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
