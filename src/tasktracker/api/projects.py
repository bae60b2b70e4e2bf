"""Project routes."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Response, status

from ..models import Column, Project, Task
from .dependencies import ContainerDep
from .schemas import ColumnRequest, HTTPError, ProjectRequest

router = APIRouter(
    prefix="/projects",
    tags=["projects"],
    responses={404: {"model": HTTPError}, 500: {"model": HTTPError}},
)


@router.get("", response_model=list[Project])
def fetch_projects(container: ContainerDep) -> list[Project]:
    """List all projects."""
    return container.projects.fetch()


@router.post("", response_model=Project, status_code=status.HTTP_201_CREATED)
def store_project(body: ProjectRequest, container: ContainerDep) -> Project:
    """Create a project with its default column."""
    return container.projects.store(Project(**body.model_dump()))


@router.get("/{project_id}", response_model=Project)
def get_project(project_id: UUID, container: ContainerDep) -> Project:
    return container.projects.get_by_id(project_id)


@router.put("/{project_id}", response_model=Project)
def update_project(project_id: UUID, body: ProjectRequest, container: ContainerDep) -> Project:
    return container.projects.update(Project(id=project_id, **body.model_dump()))


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: UUID, container: ContainerDep) -> Response:
    """Delete a project with all its columns, tasks and comments."""
    container.projects.delete(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{project_id}/columns", response_model=list[Column])
def fetch_columns(project_id: UUID, container: ContainerDep) -> list[Column]:
    """List the columns of a project in board order."""
    return container.projects.fetch_columns(project_id)


@router.post(
    "/{project_id}/columns",
    response_model=Column,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": HTTPError}},
)
def store_column(project_id: UUID, body: ColumnRequest, container: ContainerDep) -> Column:
    """Insert a column at the requested position."""
    return container.projects.store_column(Column(project_id=project_id, **body.model_dump()))


@router.get("/{project_id}/tasks", response_model=list[Task])
def fetch_tasks(project_id: UUID, container: ContainerDep) -> list[Task]:
    """List the tasks of every column of a project."""
    return container.projects.fetch_tasks(project_id)
