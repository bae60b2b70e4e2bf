"""Task routes."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Response, status

from ..models import Comment, Task
from .dependencies import ContainerDep
from .schemas import CommentRequest, HTTPError, TaskRequest

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={404: {"model": HTTPError}, 500: {"model": HTTPError}},
)


@router.get("", response_model=list[Task])
def fetch_tasks(container: ContainerDep) -> list[Task]:
    return container.tasks.fetch()


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
def store_task(body: TaskRequest, container: ContainerDep) -> Task:
    """Insert a task into a column at the requested position."""
    return container.tasks.store(Task(**body.model_dump()))


@router.get("/{task_id}", response_model=Task)
def get_task(task_id: UUID, container: ContainerDep) -> Task:
    return container.tasks.get_by_id(task_id)


@router.put("/{task_id}", response_model=Task)
def update_task(task_id: UUID, body: TaskRequest, container: ContainerDep) -> Task:
    """Edit a task, moving it within its column or to another one."""
    return container.tasks.update(Task(id=task_id, **body.model_dump()))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: UUID, container: ContainerDep) -> Response:
    container.tasks.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{task_id}/comments", response_model=list[Comment])
def fetch_comments(task_id: UUID, container: ContainerDep) -> list[Comment]:
    return container.tasks.fetch_comments(task_id)


@router.post("/{task_id}/comments", response_model=Comment, status_code=status.HTTP_201_CREATED)
def store_comment(task_id: UUID, body: CommentRequest, container: ContainerDep) -> Comment:
    return container.tasks.store_comment(Comment(task_id=task_id, text=body.text))
