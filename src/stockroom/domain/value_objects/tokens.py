"""Token value objects."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenPayload:
    """Decoded claims shared by access and refresh tokens.

    Attributes:
        user_id: Subject (``sub`` claim).
        session_id: Session identifier (``jti`` claim), stable across rotations.
        issued_at: ``iat`` in epoch seconds.
        expires_at: ``exp`` in epoch seconds.
    """

    user_id: int
    session_id: str
    issued_at: int
    expires_at: int


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenPair:
    """Access and refresh token issued together."""

    access_token: str
    refresh_token: str
