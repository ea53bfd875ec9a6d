"""Space hierarchy lookups backed by a recursive CTE.

``find_children_ids`` walks parent -> child links in one round-trip:

    WITH RECURSIVE space_tree(id) AS (
        SELECT id FROM spaces WHERE id = :root AND deleted_at IS NULL
        UNION
        SELECT child.id FROM spaces AS child
        JOIN space_tree ON child.parent_id = space_tree.id
        WHERE child.deleted_at IS NULL
    )
    SELECT id FROM space_tree WHERE id != :root

UNION (not UNION ALL) drops rows already in the working set, which is the
visited-set guard: a parent-link cycle stops producing new rows and the
recursion ends. Soft-deleted spaces cut their whole subtree off.
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from stockroom.core.errors import DatabaseError
from stockroom.core.result import Failure, Result, Success
from stockroom.domain.entities import SpaceInfo
from stockroom.infrastructure.persistence.base import not_deleted
from stockroom.infrastructure.persistence.models import SpaceModel


class SpaceLookupRepository:
    """SpaceLookupProtocol implementation."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, space_id: int) -> Result[SpaceInfo | None, DatabaseError]:
        """Find a live space by ID."""
        stmt = select(SpaceModel).where(
            SpaceModel.id == space_id, not_deleted(SpaceModel)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(
                error=DatabaseError(message=f"Failed to find space: {space_id}", cause=e)
            )
        space = result.scalar_one_or_none()
        if space is None:
            return Success(value=None)
        return Success(
            value=SpaceInfo(
                id=space.id,
                name=space.name,
                parent_id=space.parent_id,
                space_type=space.space_type,
            )
        )

    async def find_children_ids(self, space_id: int) -> Result[list[int], DatabaseError]:
        """Return all descendant space ids of ``space_id`` (root excluded).

        Args:
            space_id: Root of the subtree.

        Returns:
            Success with descendant ids in no particular order (empty for a
            leaf, a missing or a deleted root), or DatabaseError.
        """
        space_tree = (
            select(SpaceModel.id)
            .where(SpaceModel.id == space_id, not_deleted(SpaceModel))
            .cte("space_tree", recursive=True)
        )
        child = aliased(SpaceModel, name="child")
        space_tree = space_tree.union(
            select(child.id)
            .join(space_tree, child.parent_id == space_tree.c.id)
            .where(not_deleted(child))
        )
        stmt = select(space_tree.c.id).where(space_tree.c.id != space_id)

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(
                error=DatabaseError(
                    message=f"Failed to find children for space: {space_id}", cause=e
                )
            )
        return Success(value=list(result.scalars().all()))
