"""Column domain model."""

from uuid import UUID

from pydantic import Field

from .base import Entity

DEFAULT_COLUMN_NAME = "Default"
DEFAULT_COLUMN_STATUS = "Default"


class Column(Entity):
    """A column of a project board.

    Columns are ordered within their project by ``position``; the project
    reference never changes after creation.
    """

    position: int = Field(default=0, ge=0)
    name: str = Field(..., min_length=1, max_length=255)
    status: str = Field(..., min_length=1, max_length=255)
    project_id: UUID

    @property
    def parent_id(self) -> UUID:
        """The project this column belongs to."""
        return self.project_id

    @classmethod
    def default_for(cls, project_id: UUID) -> "Column":
        """Create the column every new project starts with."""
        return cls(
            position=0,
            name=DEFAULT_COLUMN_NAME,
            status=DEFAULT_COLUMN_STATUS,
            project_id=project_id,
        )
