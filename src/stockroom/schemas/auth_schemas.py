"""Authentication request/response schemas.

Endpoints:
    POST /api/v1/auth/signup   - Create account, returns token pair
    POST /api/v1/auth/signin   - Exchange credentials for token pair
    POST /api/v1/auth/refresh  - Rotate refresh token
    POST /api/v1/auth/signout  - Revoke refresh token's session
    GET  /api/v1/users/me      - Current user
"""

from datetime import datetime

from pydantic import EmailStr, Field

from stockroom.domain.entities import UserInfo
from stockroom.domain.value_objects import TokenPair
from stockroom.schemas.common_schemas import CamelModel


class SignUpRequest(CamelModel):
    """Request schema for account creation.

    POST /api/v1/auth/signup
    Returns: 201 Created
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Display name",
        examples=["Ada Lovelace"],
    )
    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["user@example.com"],
    )
    password: str = Field(
        ...,
        min_length=8,
        max_length=100,
        description="Password (8-100 chars)",
        examples=["SecurePass123!"],
    )


class SignInRequest(CamelModel):
    """Request schema for sign-in."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=8, description="Password")


class RefreshTokenRequest(CamelModel):
    """Request schema carrying a refresh token (refresh and sign-out)."""

    refresh_token: str = Field(..., min_length=1, description="Refresh token")


class TokenPairResponse(CamelModel):
    """Access and refresh token issued together."""

    access_token: str = Field(..., description="Short-lived JWT access token")
    refresh_token: str = Field(..., description="Long-lived JWT refresh token")

    @classmethod
    def from_domain(cls, pair: TokenPair) -> "TokenPairResponse":
        return cls(access_token=pair.access_token, refresh_token=pair.refresh_token)


class UserResponse(CamelModel):
    """Public user representation (no credentials)."""

    id: int
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: UserInfo) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )
