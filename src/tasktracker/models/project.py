"""Project domain model."""

from pydantic import Field

from .base import Entity


class Project(Entity):
    """A project owning an ordered set of columns."""

    name: str = Field(..., min_length=1, max_length=500)
    description: str = Field(..., max_length=1000)
