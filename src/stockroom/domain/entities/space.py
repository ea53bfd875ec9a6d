"""Space entities.

Spaces form a forest through ``parent_id``. Acyclicity is expected from the
writers; readers still guard against cycles when walking the tree.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class SpaceInfo:
    """Minimal space projection used by hierarchy lookups.

    Attributes:
        id: Space identifier.
        name: Space name.
        parent_id: Parent space, None for a root.
        space_type: Free-form type tag (warehouse, shelf, ...).
    """

    id: int
    name: str
    parent_id: int | None
    space_type: str | None
