"""User entities.

Three shapes of the same row, each handed only to the code that needs it:

- ``User``: full entity with audit fields (persistence mapping)
- ``AuthUser``: what authentication sees, including the password hash
- ``UserInfo``: what everything else sees, never the hash
"""

from dataclasses import dataclass
from datetime import datetime

from stockroom.domain.entities.audit import AuditFields


@dataclass(frozen=True, slots=True, kw_only=True)
class User:
    """User account.

    Attributes:
        audit: Identity and lifecycle timestamps.
        name: Display name.
        email: Unique login email (stored lowercase).
        password_hash: Bcrypt hash, never plaintext.
    """

    audit: AuditFields
    name: str
    email: str
    password_hash: str

    @property
    def id(self) -> int:
        return self.audit.id

    def to_auth_user(self) -> "AuthUser":
        return AuthUser(
            id=self.audit.id,
            name=self.name,
            email=self.email,
            password_hash=self.password_hash,
        )

    def to_user_info(self) -> "UserInfo":
        return UserInfo(
            id=self.audit.id,
            name=self.name,
            email=self.email,
            created_at=self.audit.created_at,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthUser:
    """User as seen by the authentication service."""

    id: int
    name: str
    email: str
    password_hash: str


@dataclass(frozen=True, slots=True, kw_only=True)
class UserInfo:
    """Public user projection (no credentials)."""

    id: int
    name: str
    email: str
    created_at: datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateUserData:
    """Input for creating a user. The password is already hashed."""

    name: str
    email: str
    password_hash: str
