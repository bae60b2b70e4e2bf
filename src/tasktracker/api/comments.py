"""Comment routes."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Response, status

from ..models import Comment
from .dependencies import ContainerDep
from .schemas import CommentRequest, HTTPError

router = APIRouter(
    prefix="/comments",
    tags=["comments"],
    responses={404: {"model": HTTPError}, 500: {"model": HTTPError}},
)


@router.get("", response_model=list[Comment])
def fetch_comments(container: ContainerDep) -> list[Comment]:
    return container.comments.fetch()


@router.get("/{comment_id}", response_model=Comment)
def get_comment(comment_id: UUID, container: ContainerDep) -> Comment:
    return container.comments.get_by_id(comment_id)


@router.put("/{comment_id}", response_model=Comment)
def update_comment(comment_id: UUID, body: CommentRequest, container: ContainerDep) -> Comment:
    """Change a comment's text."""
    current = container.comments.get_by_id(comment_id)
    return container.comments.update(current.model_copy(update={"text": body.text}))


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(comment_id: UUID, container: ContainerDep) -> Response:
    container.comments.delete(comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
