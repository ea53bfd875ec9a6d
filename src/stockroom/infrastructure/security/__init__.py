"""Security adapters: token issuance and secret hashing."""

from stockroom.infrastructure.security.bcrypt_hasher import BcryptHasher
from stockroom.infrastructure.security.jwt_token_service import (
    ACCESS_TOKEN_TTL_SECONDS,
    REFRESH_TOKEN_TTL_SECONDS,
    JWTTokenService,
)

__all__ = [
    "ACCESS_TOKEN_TTL_SECONDS",
    "REFRESH_TOKEN_TTL_SECONDS",
    "BcryptHasher",
    "JWTTokenService",
]
