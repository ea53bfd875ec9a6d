"""Space hierarchy lookup protocol."""

from typing import Protocol

from stockroom.core.errors import DomainError
from stockroom.core.result import Result
from stockroom.domain.entities import SpaceInfo


class SpaceLookupProtocol(Protocol):
    """Read access to the space tree."""

    async def find_by_id(
        self, space_id: int
    ) -> Result[SpaceInfo | None, DomainError]:
        """Return the space, or None when missing or soft-deleted."""
        ...

    async def find_children_ids(self, space_id: int) -> Result[list[int], DomainError]:
        """Return every descendant of ``space_id``, excluding ``space_id``.

        The result is the full transitive closure in no particular order.
        Must terminate even if the stored parent links contain a cycle.
        """
        ...
