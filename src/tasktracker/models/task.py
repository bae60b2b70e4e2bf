"""Task domain model."""

from uuid import UUID

from pydantic import Field

from .base import Entity


class Task(Entity):
    """A task card, ordered within its column by ``position``.

    Unlike columns, a task may change parent: moving it to another column
    is a cross-parent reorder.
    """

    position: int = Field(default=0, ge=0)
    name: str = Field(..., min_length=1, max_length=500)
    description: str = Field(..., max_length=5000)
    column_id: UUID

    @property
    def parent_id(self) -> UUID:
        """The column this task currently sits in."""
        return self.column_id
