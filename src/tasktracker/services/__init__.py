"""Service layer for business logic."""

from .column_service import ColumnService
from .comment_service import CommentService
from .ordering import SiblingOrder
from .project_service import ProjectService
from .task_service import TaskService

__all__ = [
    "ColumnService",
    "CommentService",
    "ProjectService",
    "SiblingOrder",
    "TaskService",
]
