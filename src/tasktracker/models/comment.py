"""Comment domain model."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from .base import Entity


class Comment(Entity):
    """A comment attached to a task."""

    text: str = Field(..., min_length=1, max_length=5000)
    task_id: UUID
    created_at: datetime | None = None  # Stamped by the service on store
