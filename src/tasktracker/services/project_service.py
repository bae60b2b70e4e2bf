"""Service for project CRUD operations."""

from __future__ import annotations

import logging
from uuid import UUID

from ..errors import NotFoundError, error_context
from ..models import Column, Project, Task
from ..repositories import ProjectRepositoryProtocol, TaskRepositoryProtocol
from .column_service import ColumnService

logger = logging.getLogger(__name__)


class ProjectService:
    """Service for project CRUD operations."""

    def __init__(
        self,
        project_repository: ProjectRepositoryProtocol,
        column_service: ColumnService,
        task_repository: TaskRepositoryProtocol,
    ) -> None:
        self.project_repository = project_repository
        self.column_service = column_service
        self.task_repository = task_repository

    def fetch(self) -> list[Project]:
        """Get all projects."""
        return self.project_repository.fetch()

    def get_by_id(self, project_id: UUID) -> Project:
        """Get a project by ID.

        Raises:
            NotFoundError: If the project does not exist.
        """
        project = self.project_repository.get_by_id(project_id)
        if project is None:
            raise NotFoundError("project", project_id)
        return project

    def store(self, project: Project) -> Project:
        """
        Create a project together with its default column.

        The two writes are separate: if the column cannot be stored the
        project stays persisted without any column.
        """
        with error_context("store project"):
            stored = self.project_repository.store(project)
        with error_context(f"store default column for project {stored.id}"):
            column = self.column_service.store(Column.default_for(stored.id))
        logger.info(
            "Project created: %s (%s), default column %s", stored.id, stored.name, column.id
        )
        return stored

    def update(self, project: Project) -> Project:
        """Overwrite a project's name and description."""
        with error_context("update project"):
            self.get_by_id(project.id)
            self.project_repository.update(project)
        logger.info("Project updated: %s", project.id)
        return project

    def delete(self, project_id: UUID) -> None:
        """Delete a project with all its columns, tasks and comments."""
        with error_context("delete project"):
            self.get_by_id(project_id)
        self.project_repository.delete(project_id)
        logger.info("Project deleted: %s", project_id)

    def fetch_columns(self, project_id: UUID) -> list[Column]:
        """Get the columns of a project, ordered by position."""
        with error_context("fetch columns by project id"):
            self.get_by_id(project_id)
        return self.column_service.fetch_by_project_id(project_id)

    def store_column(self, column: Column) -> Column:
        """Add a column to an existing project."""
        with error_context("store column: get project by id"):
            self.get_by_id(column.project_id)
        return self.column_service.store(column)

    def fetch_tasks(self, project_id: UUID) -> list[Task]:
        """Get the tasks of every column of a project."""
        with error_context("fetch tasks by project id"):
            self.get_by_id(project_id)
        return self.task_repository.fetch_by_project_id(project_id)
