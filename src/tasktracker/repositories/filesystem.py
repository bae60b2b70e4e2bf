"""Filesystem-based repositories backed by YAML collections."""

from __future__ import annotations

import logging
import os
import threading
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID, uuid4

import yaml
from pydantic import ValidationError

from ..errors import NotFoundError, RepositoryError
from ..models import Column, Comment, Entity, Project, Task

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Entity)

_EPOCH = datetime.min.replace(tzinfo=UTC)


class YamlCollection(Generic[EntityT]):
    """One YAML document holding every record of a model type.

    Writes go to a temporary file that is fsynced and then moved over the
    original, so readers only ever see a complete previous or next state.
    """

    VERSION = 1

    def __init__(self, path: Path, key: str, model: type[EntityT]) -> None:
        self.path = path
        self.key = key
        self.model = model

    def load(self) -> list[EntityT]:
        """Read all records, or an empty list if the file does not exist yet."""
        if not self.path.exists():
            return []
        try:
            with self.path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return [self.model.model_validate(raw) for raw in data.get(self.key) or []]
        except (OSError, yaml.YAMLError, ValidationError) as e:
            raise RepositoryError(f"cannot read {self.path}: {e}") from e

    def save(self, records: list[EntityT]) -> None:
        """Replace the stored records."""
        payload: dict[str, Any] = {
            "version": self.VERSION,
            self.key: [record.model_dump(mode="json") for record in records],
        }
        tmp_path = self.path.with_suffix(f"{self.path.suffix}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                f.write("# Auto-generated - do not edit manually\n")
                yaml.safe_dump(payload, f, default_flow_style=False, sort_keys=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except (OSError, yaml.YAMLError) as e:
            raise RepositoryError(f"cannot write {self.path}: {e}") from e


class FilesystemDatabase:
    """
    The set of YAML collections under one data directory.

    A single re-entrant lock serialises every read-modify-write cycle
    across all collections within the process.
    """

    PROJECTS_YAML = "projects.yaml"
    COLUMNS_YAML = "columns.yaml"
    TASKS_YAML = "tasks.yaml"
    COMMENTS_YAML = "comments.yaml"

    def __init__(self, data_root: Path) -> None:
        """
        Initialize the database.

        Args:
            data_root: Directory holding the collection files (e.g., .tasktracker/)
        """
        self.data_root = data_root
        self.lock = threading.RLock()
        self.projects = YamlCollection(data_root / self.PROJECTS_YAML, "projects", Project)
        self.columns = YamlCollection(data_root / self.COLUMNS_YAML, "columns", Column)
        self.tasks = YamlCollection(data_root / self.TASKS_YAML, "tasks", Task)
        self.comments = YamlCollection(data_root / self.COMMENTS_YAML, "comments", Comment)

    def ensure_directory(self) -> None:
        """Create the data directory if it doesn't exist."""
        self.data_root.mkdir(parents=True, exist_ok=True)

    def validate(self) -> tuple[bool, str | None]:
        """Check that the data directory is usable.

        Returns:
            (True, None) if the directory exists or can be created,
            (False, reason) otherwise.
        """
        try:
            self.ensure_directory()
            return (True, None)
        except OSError as e:
            return (False, f"Cannot access data directory: {e}")


class _FilesystemRepository(Generic[EntityT]):
    """CRUD over one collection of a ``FilesystemDatabase``."""

    kind: ClassVar[str] = "item"

    def __init__(self, database: FilesystemDatabase, collection: YamlCollection[EntityT]) -> None:
        self.database = database
        self._collection = collection

    def _ordered(self, records: list[EntityT]) -> list[EntityT]:
        return records

    def fetch(self) -> list[EntityT]:
        """Load all records."""
        with self.database.lock:
            return self._ordered(self._collection.load())

    def get_by_id(self, record_id: UUID) -> EntityT | None:
        """Load a single record by ID."""
        with self.database.lock:
            for record in self._collection.load():
                if record.id == record_id:
                    return record
        return None

    def store(self, record: EntityT) -> EntityT:
        """Insert a new record under a freshly assigned ID."""
        stored = record.model_copy(update={"id": uuid4()})
        with self.database.lock:
            records = self._collection.load()
            records.append(stored)
            self._collection.save(records)
        logger.debug("Stored %s: %s", self.kind, stored.id)
        return stored

    def update(self, *changed: EntityT) -> None:
        """Write a batch of existing records in one file replacement."""
        if not changed:
            return
        with self.database.lock:
            records = self._collection.load()
            index = {record.id: i for i, record in enumerate(records)}
            for record in changed:
                if record.id not in index:
                    raise NotFoundError(self.kind, record.id)
            for record in changed:
                records[index[record.id]] = record
            self._collection.save(records)
        logger.debug("Updated %d %s record(s)", len(changed), self.kind)

    def delete(self, record_id: UUID) -> None:
        """Delete a record; unknown IDs are ignored."""
        with self.database.lock:
            records = self._collection.load()
            keep = [record for record in records if record.id != record_id]
            if len(keep) != len(records):
                self._collection.save(keep)


class FilesystemProjectRepository(_FilesystemRepository[Project]):
    """Projects stored in projects.yaml."""

    kind = "project"

    def __init__(self, database: FilesystemDatabase) -> None:
        super().__init__(database, database.projects)

    def delete(self, project_id: UUID) -> None:
        """Delete a project and everything below it."""
        db = self.database
        with db.lock:
            columns = db.columns.load()
            column_ids = {c.id for c in columns if c.project_id == project_id}
            tasks = db.tasks.load()
            task_ids = {t.id for t in tasks if t.column_id in column_ids}

            # Children first so a failure never leaves orphans behind
            db.comments.save([c for c in db.comments.load() if c.task_id not in task_ids])
            db.tasks.save([t for t in tasks if t.id not in task_ids])
            db.columns.save([c for c in columns if c.id not in column_ids])
            super().delete(project_id)
        logger.debug(
            "Deleted project %s with %d column(s) and %d task(s)",
            project_id,
            len(column_ids),
            len(task_ids),
        )


class FilesystemColumnRepository(_FilesystemRepository[Column]):
    """Columns stored in columns.yaml, ordered by position."""

    kind = "column"

    def __init__(self, database: FilesystemDatabase) -> None:
        super().__init__(database, database.columns)

    def _ordered(self, records: list[Column]) -> list[Column]:
        return sorted(records, key=lambda c: c.position)

    def fetch_by_project_id(self, project_id: UUID) -> list[Column]:
        """Load the columns of one project."""
        return [c for c in self.fetch() if c.project_id == project_id]


class FilesystemTaskRepository(_FilesystemRepository[Task]):
    """Tasks stored in tasks.yaml, ordered by position."""

    kind = "task"

    def __init__(self, database: FilesystemDatabase) -> None:
        super().__init__(database, database.tasks)

    def _ordered(self, records: list[Task]) -> list[Task]:
        return sorted(records, key=lambda t: t.position)

    def fetch_by_column_id(self, column_id: UUID) -> list[Task]:
        """Load the tasks of one column."""
        return [t for t in self.fetch() if t.column_id == column_id]

    def fetch_by_project_id(self, project_id: UUID) -> list[Task]:
        """Load the tasks of every column belonging to a project."""
        with self.database.lock:
            column_ids = {
                c.id for c in self.database.columns.load() if c.project_id == project_id
            }
            return [t for t in self.fetch() if t.column_id in column_ids]

    def delete(self, task_id: UUID) -> None:
        """Delete a task and its comments."""
        db = self.database
        with db.lock:
            comments = db.comments.load()
            keep = [c for c in comments if c.task_id != task_id]
            if len(keep) != len(comments):
                db.comments.save(keep)
            super().delete(task_id)


class FilesystemCommentRepository(_FilesystemRepository[Comment]):
    """Comments stored in comments.yaml, oldest first."""

    kind = "comment"

    def __init__(self, database: FilesystemDatabase) -> None:
        super().__init__(database, database.comments)

    def _ordered(self, records: list[Comment]) -> list[Comment]:
        return sorted(records, key=lambda c: c.created_at or _EPOCH)

    def fetch_by_task_id(self, task_id: UUID) -> list[Comment]:
        """Load the comments of one task."""
        return [c for c in self.fetch() if c.task_id == task_id]
