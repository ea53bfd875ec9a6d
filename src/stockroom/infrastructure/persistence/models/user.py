"""User database model.

Security:
    - password_hash: bcrypt hash, NEVER plaintext

Email uniqueness only applies to live rows (partial unique index), so a
soft-deleted account does not block a new sign-up with the same address.
"""

from sqlalchemy import Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from stockroom.infrastructure.persistence.base import (
    BaseModel,
    SoftDeleteMixin,
    TimestampMixin,
)


class UserModel(SoftDeleteMixin, TimestampMixin, BaseModel):
    """User account row.

    Fields:
        id, created_at, updated_at, deleted_at: audit columns (mixins)
        name: Display name
        email: Login email, stored lowercase
        password_hash: Bcrypt hash
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        Index(
            "uq_users_email_live",
            "email",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )
