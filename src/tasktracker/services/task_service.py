"""Service for task ordering and lifecycle."""

from __future__ import annotations

import logging
from uuid import UUID

from ..errors import NotFoundError, error_context
from ..models import Comment, Task
from ..repositories import (
    ColumnRepositoryProtocol,
    CommentRepositoryProtocol,
    TaskRepositoryProtocol,
)
from ..utils import now_utc
from .ordering import SiblingOrder

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task ordering and lifecycle."""

    def __init__(
        self,
        column_repository: ColumnRepositoryProtocol,
        task_repository: TaskRepositoryProtocol,
        comment_repository: CommentRepositoryProtocol,
        resequence_on_delete: bool = False,
    ) -> None:
        """
        Args:
            column_repository: Used to check destination columns exist.
            task_repository: Task storage.
            comment_repository: Comment storage for the task's comments.
            resequence_on_delete: Close the position gap a deleted task
                leaves in its column. Off by default, in which case the
                remaining positions keep the gap.
        """
        self.column_repository = column_repository
        self.task_repository = task_repository
        self.comment_repository = comment_repository
        self.resequence_on_delete = resequence_on_delete
        self._order = SiblingOrder(task_repository, "task")

    def fetch(self) -> list[Task]:
        """Get all tasks."""
        return self.task_repository.fetch()

    def fetch_by_column_id(self, column_id: UUID) -> list[Task]:
        """Get the tasks of a column, ordered by position."""
        return self.task_repository.fetch_by_column_id(column_id)

    def fetch_by_project_id(self, project_id: UUID) -> list[Task]:
        """Get the tasks of every column of a project."""
        return self.task_repository.fetch_by_project_id(project_id)

    def get_by_id(self, task_id: UUID) -> Task:
        """Get a task by ID.

        Raises:
            NotFoundError: If the task does not exist.
        """
        task = self.task_repository.get_by_id(task_id)
        if task is None:
            raise NotFoundError("task", task_id)
        return task

    def _require_column(self, column_id: UUID) -> None:
        if self.column_repository.get_by_id(column_id) is None:
            raise NotFoundError("column", column_id)

    def store(self, task: Task) -> Task:
        """
        Insert a task into its column at the requested position.

        Tasks at or after that position shift one slot down; a position past
        the end appends.

        Raises:
            NotFoundError: If the column does not exist.
        """
        with error_context("store task: column get by id"):
            self._require_column(task.column_id)
        tasks = self.task_repository.fetch_by_column_id(task.column_id)
        stored = self._order.insert(task, tasks)
        logger.info(
            "Task created: %s (%s) in column %s at %d",
            stored.id,
            stored.name,
            stored.column_id,
            stored.position,
        )
        return stored

    def update(self, task: Task) -> Task:
        """
        Update a task, moving it within or across columns.

        Updating with the stored values writes nothing.

        Returns:
            The task as stored after the update.

        Raises:
            NotFoundError: If the task or the destination column does not exist.
        """
        with error_context("update task: fetch by id"):
            old = self.get_by_id(task.id)
        if task == old:
            logger.debug("update: task unchanged: %s", old.id)
            return old

        if task.column_id != old.column_id:
            return self.change_column(old, task)

        tasks = self.task_repository.fetch_by_column_id(task.column_id)
        moved = self._order.move(old, task, tasks)
        if moved is not old:
            logger.info("Task updated: %s (pos %d -> %d)", moved.id, old.position, moved.position)
        return moved

    def change_column(self, old: Task, task: Task) -> Task:
        """Move a task into another column at the requested position."""
        with error_context("change task column: get column by id"):
            self._require_column(task.column_id)
        old_tasks = self.task_repository.fetch_by_column_id(old.column_id)
        new_tasks = self.task_repository.fetch_by_column_id(task.column_id)
        moved = self._order.transfer(old, task, old_tasks, new_tasks)
        logger.info(
            "Task moved: %s (%s -> %s at %d)",
            moved.id,
            old.column_id,
            moved.column_id,
            moved.position,
        )
        return moved

    def delete(self, task_id: UUID) -> None:
        """
        Delete a task and its comments.

        Raises:
            NotFoundError: If the task does not exist.
        """
        with error_context("delete task"):
            task = self.get_by_id(task_id)
        self.task_repository.delete(task_id)
        if self.resequence_on_delete:
            siblings = self.task_repository.fetch_by_column_id(task.column_id)
            self._order.close_gap(task, siblings)
        logger.info("Task deleted: %s", task_id)

    def fetch_comments(self, task_id: UUID) -> list[Comment]:
        """Get the comments of a task, oldest first."""
        with error_context("get comments by task id"):
            self.get_by_id(task_id)
        return self.comment_repository.fetch_by_task_id(task_id)

    def store_comment(self, comment: Comment) -> Comment:
        """Attach a comment to its task, stamping the creation time."""
        with error_context("store comment: get task by id"):
            self.get_by_id(comment.task_id)
        comment = comment.model_copy(update={"created_at": now_utc()})
        stored = self.comment_repository.store(comment)
        logger.info("Comment created: %s on task %s", stored.id, stored.task_id)
        return stored
