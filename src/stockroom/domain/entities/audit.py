"""Audit fields shared by persisted entities.

Entities compose an ``AuditFields`` value rather than inheriting a common
base class. Soft deletion is a nullable ``deleted_at`` timestamp; the helpers
below are the only place that interprets it on the domain side.
"""

from dataclasses import dataclass, replace
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditFields:
    """Identity and lifecycle timestamps of a stored record.

    Attributes:
        id: Integer primary key.
        created_at: When the row was inserted.
        updated_at: When the row was last modified.
        deleted_at: Soft-delete marker, None while the record is live.
    """

    id: int
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


def is_deleted(audit: AuditFields) -> bool:
    """Return True when the record has been soft-deleted."""
    return audit.deleted_at is not None


def mark_deleted(audit: AuditFields, at: datetime | None = None) -> AuditFields:
    """Return a copy of ``audit`` stamped as deleted.

    Args:
        audit: Current audit fields.
        at: Deletion time (defaults to now, UTC).
    """
    moment = at or datetime.now(UTC)
    return replace(audit, deleted_at=moment, updated_at=moment)
