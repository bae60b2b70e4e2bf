"""Error kinds raised by the repositories and services."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID


class TaskTrackerError(Exception):
    """Base exception for tasktracker errors."""

    pass


class NotFoundError(TaskTrackerError):
    """The requested item does not exist."""

    def __init__(self, kind: str, item_id: UUID | str) -> None:
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind} not found: {item_id}")


class ConflictError(TaskTrackerError):
    """The action collides with existing state."""

    pass


class UniqueError(ConflictError):
    """A column status is already used in the project."""

    pass


class ColumnNameError(UniqueError):
    """A column name is already used in the project."""

    pass


class LastColumnError(ConflictError):
    """The last column of a project cannot be deleted."""

    def __init__(self, column_id: UUID) -> None:
        self.column_id = column_id
        super().__init__(f"the last column cannot be deleted: {column_id}")


class RepositoryError(TaskTrackerError):
    """The storage backend failed to read or write."""

    pass


@contextmanager
def error_context(message: str) -> Iterator[None]:
    """Attach operation context to any error raised inside the block.

    The error keeps its type so callers can still dispatch on the kind;
    the context shows up as a note in tracebacks and logs.
    """
    try:
        yield
    except Exception as e:
        e.add_note(message)
        raise
