"""Repository layer for data access."""

from .filesystem import (
    FilesystemColumnRepository,
    FilesystemCommentRepository,
    FilesystemDatabase,
    FilesystemProjectRepository,
    FilesystemTaskRepository,
    YamlCollection,
)
from .protocol import (
    ColumnRepositoryProtocol,
    CommentRepositoryProtocol,
    PositionedRepositoryProtocol,
    ProjectRepositoryProtocol,
    TaskRepositoryProtocol,
)

__all__ = [
    "ColumnRepositoryProtocol",
    "CommentRepositoryProtocol",
    "FilesystemColumnRepository",
    "FilesystemCommentRepository",
    "FilesystemDatabase",
    "FilesystemProjectRepository",
    "FilesystemTaskRepository",
    "PositionedRepositoryProtocol",
    "ProjectRepositoryProtocol",
    "TaskRepositoryProtocol",
    "YamlCollection",
]
