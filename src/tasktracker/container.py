"""Wiring of repositories and services."""

from __future__ import annotations

from pathlib import Path

from .repositories import (
    FilesystemColumnRepository,
    FilesystemCommentRepository,
    FilesystemDatabase,
    FilesystemProjectRepository,
    FilesystemTaskRepository,
)
from .services import ColumnService, CommentService, ProjectService, TaskService


class Container:
    """Repositories and services built once over one data directory."""

    def __init__(self, data_root: Path, resequence_on_task_delete: bool = False) -> None:
        self.database = FilesystemDatabase(data_root)

        self.project_repository = FilesystemProjectRepository(self.database)
        self.column_repository = FilesystemColumnRepository(self.database)
        self.task_repository = FilesystemTaskRepository(self.database)
        self.comment_repository = FilesystemCommentRepository(self.database)

        self.columns = ColumnService(self.column_repository, self.task_repository)
        self.tasks = TaskService(
            self.column_repository,
            self.task_repository,
            self.comment_repository,
            resequence_on_delete=resequence_on_task_delete,
        )
        self.projects = ProjectService(self.project_repository, self.columns, self.task_repository)
        self.comments = CommentService(self.comment_repository)
