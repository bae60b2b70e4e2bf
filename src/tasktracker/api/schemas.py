"""Request and response bodies."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field


class ProjectRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=500)
    description: str = Field(..., max_length=1000)


class ColumnRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    status: str = Field(..., min_length=1, max_length=255)
    position: int = Field(0, ge=0)


class TaskRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=500)
    description: str = Field(..., max_length=5000)
    position: int = Field(0, ge=0)
    column_id: UUID


class ColumnTaskRequest(BaseModel):
    """A task created under a column given by the URL."""

    name: str = Field(..., min_length=1, max_length=500)
    description: str = Field(..., max_length=5000)
    position: int = Field(0, ge=0)


class CommentRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=5000)


class HTTPError(BaseModel):
    code: int
    message: str
