"""Column routes."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Response, status

from ..models import Column, Task
from .dependencies import ContainerDep
from .schemas import ColumnRequest, ColumnTaskRequest, HTTPError

router = APIRouter(
    prefix="/columns",
    tags=["columns"],
    responses={404: {"model": HTTPError}, 500: {"model": HTTPError}},
)


@router.get("", response_model=list[Column])
def fetch_columns(container: ContainerDep) -> list[Column]:
    return container.columns.fetch()


@router.get("/{column_id}", response_model=Column)
def get_column(column_id: UUID, container: ContainerDep) -> Column:
    return container.columns.get_by_id(column_id)


@router.put("/{column_id}", response_model=Column, responses={409: {"model": HTTPError}})
def update_column(column_id: UUID, body: ColumnRequest, container: ContainerDep) -> Column:
    """Rename or move a column within its project."""
    return container.columns.update_fields(column_id, body.model_dump())


@router.delete(
    "/{column_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={409: {"model": HTTPError}},
)
def delete_column(column_id: UUID, container: ContainerDep) -> Response:
    """Delete a column, moving its tasks to a neighbouring column."""
    container.columns.delete(column_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{column_id}/tasks", response_model=list[Task])
def fetch_tasks(column_id: UUID, container: ContainerDep) -> list[Task]:
    return container.columns.fetch_tasks(column_id)


@router.post("/{column_id}/tasks", response_model=Task, status_code=status.HTTP_201_CREATED)
def store_task(column_id: UUID, body: ColumnTaskRequest, container: ContainerDep) -> Task:
    """Insert a task into this column at the requested position."""
    return container.tasks.store(Task(column_id=column_id, **body.model_dump()))
