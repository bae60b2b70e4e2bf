"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from ..container import Container


def get_container(request: Request) -> Container:
    """The container the app was created with."""
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]
