"""Service for comment CRUD operations."""

from __future__ import annotations

import logging
from uuid import UUID

from ..errors import NotFoundError, error_context
from ..models import Comment
from ..repositories import CommentRepositoryProtocol

logger = logging.getLogger(__name__)


class CommentService:
    """Service for comment CRUD operations.

    Comments are created through ``TaskService.store_comment``, which checks
    the task exists and stamps the creation time.
    """

    def __init__(self, repository: CommentRepositoryProtocol) -> None:
        self.repository = repository

    def fetch(self) -> list[Comment]:
        """Get all comments."""
        return self.repository.fetch()

    def fetch_by_task_id(self, task_id: UUID) -> list[Comment]:
        """Get the comments of a task, oldest first."""
        return self.repository.fetch_by_task_id(task_id)

    def get_by_id(self, comment_id: UUID) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist.
        """
        comment = self.repository.get_by_id(comment_id)
        if comment is None:
            raise NotFoundError("comment", comment_id)
        return comment

    def update(self, comment: Comment) -> Comment:
        """Change a comment's text; its task and creation time are kept."""
        with error_context("update comment: get by id"):
            old = self.get_by_id(comment.id)
        comment = comment.model_copy(
            update={"task_id": old.task_id, "created_at": old.created_at}
        )
        self.repository.update(comment)
        logger.info("Comment updated: %s", comment.id)
        return comment

    def delete(self, comment_id: UUID) -> None:
        """Delete a comment."""
        with error_context("delete comment: get by id"):
            self.get_by_id(comment_id)
        self.repository.delete(comment_id)
        logger.info("Comment deleted: %s", comment_id)
