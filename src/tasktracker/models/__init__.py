"""Data models."""

from .base import Entity
from .column import DEFAULT_COLUMN_NAME, DEFAULT_COLUMN_STATUS, Column
from .comment import Comment
from .project import Project
from .task import Task

__all__ = [
    "DEFAULT_COLUMN_NAME",
    "DEFAULT_COLUMN_STATUS",
    "Column",
    "Comment",
    "Entity",
    "Project",
    "Task",
]
