"""JWT token service (adapter).

Implements TokenServiceProtocol with PyJWT (HMAC-SHA256) and an expiring
key-value store holding one hashed refresh token per session.

Session lifecycle:
    Unissued --issue--> Active --rotate--> Active (same session id, new token)
    Active --invalidate--> Revoked
    Active --store TTL--> Expired

Claims (both token kinds):
    sub    user id (decimal string)
    jti    session id, unguessable, kept across rotations
    iat    issued-at, epoch seconds
    exp    expiry, epoch seconds
    type   "access" or "refresh"
    nonce  random value so two tokens minted in the same second differ

Security:
    - Access tokens are stateless: signature and expiry only
    - Refresh tokens must also match the hash stored for their session, so a
      superseded token is rejected even while its signature is still valid
    - Only hashes of refresh tokens are stored
"""

import asyncio
import secrets
from datetime import UTC, datetime
from typing import Any

import jwt
from uuid_extensions import uuid7

from stockroom.core.errors import DatabaseError, DomainError
from stockroom.core.result import Failure, Result, Success
from stockroom.domain.errors import InvalidTokenError, TokenExpiredError
from stockroom.domain.protocols import (
    KeyValueStoreProtocol,
    LoggerProtocol,
    SecretHashingProtocol,
)
from stockroom.domain.value_objects import TokenPair, TokenPayload
from stockroom.infrastructure.cache.cache_keys import RefreshTokenKeys

# Fixed lifetimes; the refresh lifetime is also the store TTL.
ACCESS_TOKEN_TTL_SECONDS = 900
REFRESH_TOKEN_TTL_SECONDS = 604800

_ACCESS = "access"
_REFRESH = "refresh"
_REQUIRED_CLAIMS = ["sub", "jti", "iat", "exp"]


def _payload_from_claims(claims: dict[str, Any]) -> TokenPayload | None:
    """Build a TokenPayload from raw claims, or None if they are malformed."""
    sub = claims.get("sub")
    jti = claims.get("jti")
    iat = claims.get("iat")
    exp = claims.get("exp")

    if isinstance(sub, str) and sub.isdigit():
        user_id = int(sub)
    elif isinstance(sub, int) and not isinstance(sub, bool):
        user_id = sub
    else:
        return None

    if not isinstance(jti, str) or not jti:
        return None

    return TokenPayload(
        user_id=user_id,
        session_id=jti,
        issued_at=iat if isinstance(iat, int) else 0,
        expires_at=exp if isinstance(exp, int) else 0,
    )


class JWTTokenService:
    """Access/refresh token pair service.

    Usage:
        token_service = JWTTokenService(
            secret_key=settings.secret_key,
            store=get_key_value_store(),
            hasher=get_password_hasher(),
            logger=get_logger(),
        )

        match await token_service.generate_token_pair(user_id=42):
            case Success(value=pair):
                ...
    """

    def __init__(
        self,
        *,
        secret_key: str,
        store: KeyValueStoreProtocol,
        hasher: SecretHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize token service.

        Args:
            secret_key: HMAC-SHA256 signing key, at least 32 bytes.
            store: Expiring key-value store for refresh-token hashes.
            hasher: One-way salted hasher for refresh tokens.
            logger: Structured logger.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = "HS256"
        self._store = store
        self._hasher = hasher
        self._logger = logger

    async def generate_token_pair(
        self, user_id: int, session_id: str | None = None
    ) -> Result[TokenPair, DomainError]:
        """Issue an access/refresh pair and record the refresh token hash.

        Args:
            user_id: Subject of both tokens.
            session_id: Existing session to continue (rotation). A new
                session id is generated when None.

        Returns:
            Success(TokenPair), or Failure(DatabaseError) when signing,
            hashing or the store write fails.
        """
        session_id = session_id or str(uuid7())
        now = int(datetime.now(UTC).timestamp())

        try:
            access_token = self._encode(
                user_id, session_id, now, ACCESS_TOKEN_TTL_SECONDS, _ACCESS
            )
            refresh_token = self._encode(
                user_id, session_id, now, REFRESH_TOKEN_TTL_SECONDS, _REFRESH
            )
            refresh_hash = await asyncio.to_thread(
                self._hasher.hash_secret, refresh_token
            )
        except Exception as e:
            self._logger.error("Token pair signing failed", error=e, user_id=user_id)
            return Failure(
                error=DatabaseError(message="Failed to generate token pair", cause=e)
            )

        key = RefreshTokenKeys.session(user_id, session_id)
        stored = await self._store.set_with_ttl(
            key, refresh_hash, REFRESH_TOKEN_TTL_SECONDS
        )
        match stored:
            case Failure(error=error):
                cause = error.cause if isinstance(error, DatabaseError) else None
                self._logger.error(
                    "Refresh token store write failed", error=cause, user_id=user_id
                )
                return Failure(
                    error=DatabaseError(
                        message="Failed to generate token pair", cause=cause
                    )
                )

        self._logger.debug("Token pair issued", user_id=user_id, session_id=session_id)
        return Success(
            value=TokenPair(access_token=access_token, refresh_token=refresh_token)
        )

    def verify_access_token(self, token: str) -> Result[TokenPayload, DomainError]:
        """Verify signature and expiry of an access token.

        Stateless: no store lookup.

        Returns:
            Success(TokenPayload), Failure(TokenExpiredError) when
            ``now >= exp``, Failure(InvalidTokenError) otherwise.
        """
        return self._decode(
            token,
            token_type=_ACCESS,
            invalid_message="Invalid access token",
            expired_message="Access token has expired",
        )

    async def verify_refresh_token(
        self, token: str
    ) -> Result[TokenPayload, DomainError]:
        """Verify a refresh token against its signature, expiry and the store.

        The session entry must exist and the presented token must hash to the
        stored value; a rotated-away token fails the second check.

        Returns:
            Success(TokenPayload), Failure(TokenExpiredError),
            Failure(InvalidTokenError) or Failure(DatabaseError).
        """
        decoded = self._decode(
            token,
            token_type=_REFRESH,
            invalid_message="Invalid refresh token",
            expired_message="Refresh token has expired",
        )
        match decoded:
            case Failure():
                return decoded
            case Success(value=payload):
                pass

        key = RefreshTokenKeys.session(payload.user_id, payload.session_id)
        stored = await self._store.get(key)
        match stored:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=None):
                return Failure(
                    error=InvalidTokenError(
                        message="Refresh token not found or already revoked"
                    )
                )
            case Success(value=stored_hash):
                pass

        matches = await asyncio.to_thread(self._hasher.verify_secret, token, stored_hash)
        if not matches:
            # Signed by us, session alive, but not the current token: replay.
            self._logger.warning(
                "Superseded refresh token presented",
                user_id=payload.user_id,
                session_id=payload.session_id,
            )
            return Failure(error=InvalidTokenError(message="Refresh token mismatch"))

        return Success(value=payload)

    async def invalidate_refresh_token(self, token: str) -> Result[None, DomainError]:
        """Revoke the session a refresh token belongs to.

        Decodes without verifying signature or expiry so a session can be
        closed with a nearly expired token. Deleting an entry that is already
        gone is reported as InvalidTokenError.

        Returns:
            Success(None), Failure(InvalidTokenError) or Failure(DatabaseError).
        """
        try:
            claims = jwt.decode(token, options={"verify_signature": False})
        except jwt.InvalidTokenError:
            return Failure(error=InvalidTokenError(message="Invalid token format"))

        payload = _payload_from_claims(claims)
        if payload is None:
            return Failure(error=InvalidTokenError(message="Invalid token format"))

        key = RefreshTokenKeys.session(payload.user_id, payload.session_id)
        match await self._store.delete(key):
            case Failure(error=error):
                cause = error.cause if isinstance(error, DatabaseError) else None
                self._logger.error(
                    "Refresh token revocation failed",
                    error=cause,
                    user_id=payload.user_id,
                )
                return Failure(
                    error=DatabaseError(
                        message="Failed to invalidate refresh token", cause=cause
                    )
                )
            case Success(value=0):
                return Failure(
                    error=InvalidTokenError(
                        message="Refresh token not found or already invalidated"
                    )
                )

        self._logger.debug(
            "Refresh token revoked",
            user_id=payload.user_id,
            session_id=payload.session_id,
        )
        return Success(value=None)

    async def rotate_refresh_token(self, token: str) -> Result[TokenPair, DomainError]:
        """Exchange a refresh token for a new pair in the same session.

        Verify, invalidate the old entry, then issue with the session id
        reused. If two requests rotate the same token concurrently only one
        deletes the entry; the other gets InvalidTokenError.
        """
        verified = await self.verify_refresh_token(token)
        match verified:
            case Failure():
                return verified
            case Success(value=payload):
                pass

        invalidated = await self.invalidate_refresh_token(token)
        match invalidated:
            case Failure(error=error):
                return Failure(error=error)

        return await self.generate_token_pair(
            user_id=payload.user_id, session_id=payload.session_id
        )

    def _encode(
        self,
        user_id: int,
        session_id: str,
        issued_at: int,
        ttl_seconds: int,
        token_type: str,
    ) -> str:
        claims = {
            "sub": str(user_id),
            "jti": session_id,
            "iat": issued_at,
            "exp": issued_at + ttl_seconds,
            "type": token_type,
            "nonce": secrets.token_hex(8),
        }
        token: str = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        return token

    def _decode(
        self,
        token: str,
        *,
        token_type: str,
        invalid_message: str,
        expired_message: str,
    ) -> Result[TokenPayload, DomainError]:
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            return Failure(error=TokenExpiredError(message=expired_message))
        except jwt.InvalidTokenError:
            return Failure(error=InvalidTokenError(message=invalid_message))

        if claims.get("type") != token_type:
            return Failure(error=InvalidTokenError(message=invalid_message))

        payload = _payload_from_claims(claims)
        if payload is None:
            return Failure(error=InvalidTokenError(message=invalid_message))
        return Success(value=payload)
