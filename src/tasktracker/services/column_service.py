"""Service for column ordering and lifecycle."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any
from uuid import UUID

from ..errors import ColumnNameError, LastColumnError, NotFoundError, UniqueError, error_context
from ..models import Column, Task
from ..repositories import ColumnRepositoryProtocol, TaskRepositoryProtocol
from .ordering import SiblingOrder, plan_append

logger = logging.getLogger(__name__)


class ColumnService:
    """Service for column ordering and lifecycle."""

    def __init__(
        self,
        column_repository: ColumnRepositoryProtocol,
        task_repository: TaskRepositoryProtocol,
    ) -> None:
        self.column_repository = column_repository
        self.task_repository = task_repository
        self._order = SiblingOrder(column_repository, "column")

    def fetch(self) -> list[Column]:
        """Get all columns."""
        return self.column_repository.fetch()

    def fetch_by_project_id(self, project_id: UUID) -> list[Column]:
        """Get the columns of a project, ordered by position."""
        return self.column_repository.fetch_by_project_id(project_id)

    def get_by_id(self, column_id: UUID) -> Column:
        """Get a column by ID.

        Raises:
            NotFoundError: If the column does not exist.
        """
        column = self.column_repository.get_by_id(column_id)
        if column is None:
            raise NotFoundError("column", column_id)
        return column

    def fetch_tasks(self, column_id: UUID) -> list[Task]:
        """Get the tasks of a column, ordered by position."""
        with error_context("fetch tasks by column id"):
            self.get_by_id(column_id)
        return self.task_repository.fetch_by_column_id(column_id)

    def store(self, column: Column) -> Column:
        """
        Insert a column into its project at the requested position.

        Columns at or after that position shift one slot to the right; a
        position past the end appends. The caller is responsible for
        checking the project exists.

        Raises:
            ColumnNameError: If another column of the project has the same name.
            UniqueError: If another column of the project has the same status.
        """
        columns = self.column_repository.fetch_by_project_id(column.project_id)
        check_unique(column, columns)
        stored = self._order.insert(column, columns)
        logger.info(
            "Column created: %s (%s) in project %s at %d",
            stored.id,
            stored.name,
            stored.project_id,
            stored.position,
        )
        return stored

    def update(self, column: Column) -> Column:
        """
        Update a column, moving it when its position changes.

        The project reference cannot be changed and is taken from the stored
        column. Updating with the stored values writes nothing.

        Returns:
            The column as stored after the update.
        """
        with error_context("update column: fetch by id"):
            old = self.get_by_id(column.id)
        return self._apply_update(old, column.model_copy(update={"project_id": old.project_id}))

    def update_fields(self, column_id: UUID, changes: dict[str, Any]) -> Column:
        """Apply validated field changes (name, status, position) to a stored column.

        Raises:
            NotFoundError: If the column does not exist.
        """
        with error_context("update column: fetch by id"):
            old = self.get_by_id(column_id)
        changes = {k: v for k, v in changes.items() if k not in ("id", "project_id")}
        return self._apply_update(old, old.model_copy(update=changes))

    def _apply_update(self, old: Column, updated: Column) -> Column:
        if updated == old:
            logger.debug("update: column unchanged: %s", old.id)
            return old

        columns = self.column_repository.fetch_by_project_id(old.project_id)
        check_unique(updated, columns)

        moved = self._order.move(old, updated, columns)
        if moved is not old:
            logger.info("Column updated: %s (pos %d -> %d)", moved.id, old.position, moved.position)
        return moved

    def delete(self, column_id: UUID) -> None:
        """
        Delete a column, handing its tasks to a neighbour.

        The tasks go to the column on the left, or to the right-hand one when
        the deleted column is the first. They are appended after the
        neighbour's own tasks in their existing order, then the remaining
        columns close the gap.

        Raises:
            NotFoundError: If the column does not exist.
            LastColumnError: If it is the only column of its project.
        """
        with error_context("delete column: get by id"):
            column = self.get_by_id(column_id)
        columns = self.column_repository.fetch_by_project_id(column.project_id)
        if len(columns) == 1:
            raise LastColumnError(column_id)

        index = next(i for i, c in enumerate(columns) if c.id == column_id)
        target = columns[index - 1] if index > 0 else columns[1]

        migrated = self._migrate_tasks(column, target)
        with error_context(f"delete column {column_id}"):
            self.column_repository.delete(column_id)
        self._order.close_gap(column, columns)
        logger.info(
            "Column deleted: %s (%d task(s) moved to %s)", column_id, migrated, target.id
        )

    def _migrate_tasks(self, column: Column, target: Column) -> int:
        """Append every task of ``column`` to ``target``; returns how many moved."""
        tasks = self.task_repository.fetch_by_column_id(column.id)
        if not tasks:
            return 0
        target_tasks = self.task_repository.fetch_by_column_id(target.id)
        moved = [
            task.model_copy(update={"column_id": target.id})
            for task in plan_append(tasks, target_tasks)
        ]
        with error_context(f"move tasks from column {column.id} to {target.id}"):
            self.task_repository.update(*moved)
        return len(moved)


def check_unique(column: Column, columns: Sequence[Column]) -> None:
    """Reject a column whose name or status another sibling already uses.

    Raises:
        ColumnNameError: On a name collision.
        UniqueError: On a status collision.
    """
    for other in columns:
        if other.id == column.id:
            continue
        if other.name == column.name:
            raise ColumnNameError(f"column name must be unique: {column.name!r}")
        if other.status == column.status:
            raise UniqueError(f"column status must be unique: {column.status!r}")
