"""Integration tests for CommentService."""

from pathlib import Path
from uuid import uuid4

import pytest

from tasktracker.container import Container
from tasktracker.errors import NotFoundError
from tasktracker.models import Comment, Project, Task


@pytest.fixture
def container(tmp_path: Path) -> Container:
    """Create a container over a temporary data directory."""
    return Container(tmp_path / ".tasktracker")


@pytest.fixture
def task(container: Container) -> Task:
    project = container.projects.store(Project(name="Board", description=""))
    (column,) = container.columns.fetch_by_project_id(project.id)
    return container.tasks.store(Task(name="a", description="", column_id=column.id))


@pytest.fixture
def comment(container: Container, task: Task) -> Comment:
    return container.tasks.store_comment(Comment(text="first", task_id=task.id))


class TestCommentService:
    """Tests for comment reads, edits and deletes."""

    def test_fetch_by_task(self, container: Container, task: Task, comment: Comment):
        container.tasks.store_comment(Comment(text="second", task_id=task.id))

        comments = container.comments.fetch_by_task_id(task.id)

        assert [c.text for c in comments] == ["first", "second"]

    def test_update_keeps_task_and_creation_time(self, container: Container, comment: Comment):
        """Only the text of a comment can change."""
        updated = container.comments.update(
            comment.model_copy(update={"text": "edited", "task_id": uuid4(), "created_at": None})
        )

        assert updated.text == "edited"
        assert updated.task_id == comment.task_id
        assert updated.created_at == comment.created_at
        assert container.comments.get_by_id(comment.id) == updated

    def test_update_missing_comment(self, container: Container):
        with pytest.raises(NotFoundError):
            container.comments.update(Comment(text="ghost", task_id=uuid4()))

    def test_delete(self, container: Container, comment: Comment):
        container.comments.delete(comment.id)

        assert container.comments.fetch() == []

    def test_delete_missing_comment(self, container: Container):
        with pytest.raises(NotFoundError) as exc_info:
            container.comments.delete(uuid4())

        assert exc_info.value.kind == "comment"
