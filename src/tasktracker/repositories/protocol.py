"""Repository protocols for the storage backends."""

from typing import Protocol, TypeVar
from uuid import UUID

from ..models import Column, Comment, Project, Task

T = TypeVar("T")


class PositionedRepositoryProtocol(Protocol[T]):
    """The write half shared by the column and task repositories.

    This is all the ordering engine needs to persist sibling adjustments.
    """

    def store(self, item: T) -> T:
        """Insert a new item and return it with its assigned ID."""
        ...

    def update(self, *items: T) -> None:
        """Write a batch of existing items.

        The batch is all-or-nothing: if any item is unknown nothing is
        written and ``NotFoundError`` is raised.
        """
        ...


class ProjectRepositoryProtocol(Protocol):
    """Storage contract for projects."""

    def fetch(self) -> list[Project]:
        """Load all projects."""
        ...

    def get_by_id(self, project_id: UUID) -> Project | None:
        """Get a single project, or None if it does not exist."""
        ...

    def store(self, project: Project) -> Project:
        """Insert a project and return it with its assigned ID."""
        ...

    def update(self, project: Project) -> None:
        """Overwrite an existing project."""
        ...

    def delete(self, project_id: UUID) -> None:
        """Delete a project along with its columns, tasks and comments.

        Note:
            Does not raise an error if the project doesn't exist.
        """
        ...


class ColumnRepositoryProtocol(PositionedRepositoryProtocol[Column], Protocol):
    """Storage contract for columns.

    Column lists are always returned ordered by ``position``.
    """

    def fetch(self) -> list[Column]:
        """Load all columns."""
        ...

    def fetch_by_project_id(self, project_id: UUID) -> list[Column]:
        """Load the columns of one project."""
        ...

    def get_by_id(self, column_id: UUID) -> Column | None:
        """Get a single column, or None if it does not exist."""
        ...

    def delete(self, column_id: UUID) -> None:
        """Delete a column record.

        Note:
            Tasks are not touched; callers migrate them first.
        """
        ...


class TaskRepositoryProtocol(PositionedRepositoryProtocol[Task], Protocol):
    """Storage contract for tasks.

    Task lists are always returned ordered by ``position``.
    """

    def fetch(self) -> list[Task]:
        """Load all tasks."""
        ...

    def fetch_by_column_id(self, column_id: UUID) -> list[Task]:
        """Load the tasks of one column."""
        ...

    def fetch_by_project_id(self, project_id: UUID) -> list[Task]:
        """Load the tasks of every column of a project."""
        ...

    def get_by_id(self, task_id: UUID) -> Task | None:
        """Get a single task, or None if it does not exist."""
        ...

    def delete(self, task_id: UUID) -> None:
        """Delete a task along with its comments."""
        ...


class CommentRepositoryProtocol(Protocol):
    """Storage contract for comments.

    Comment lists are returned oldest first.
    """

    def fetch(self) -> list[Comment]:
        """Load all comments."""
        ...

    def fetch_by_task_id(self, task_id: UUID) -> list[Comment]:
        """Load the comments of one task."""
        ...

    def get_by_id(self, comment_id: UUID) -> Comment | None:
        """Get a single comment, or None if it does not exist."""
        ...

    def store(self, comment: Comment) -> Comment:
        """Insert a comment and return it with its assigned ID."""
        ...

    def update(self, comment: Comment) -> None:
        """Overwrite an existing comment."""
        ...

    def delete(self, comment_id: UUID) -> None:
        """Delete a comment."""
        ...
