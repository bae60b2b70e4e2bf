"""Base class shared by the stored models."""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Entity(BaseModel):
    """A stored record identified by a UUID."""

    id: UUID = Field(default_factory=uuid4)
