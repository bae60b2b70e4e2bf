"""FastAPI application factory."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI

from .. import __version__
from ..config import Settings
from ..container import Container
from . import columns, comments, projects, tasks
from .errors import register_error_handlers
from .middleware import request_context

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    container: Container | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings; read from the environment if omitted.
        container: Prebuilt repositories and services; built from
            ``settings.data_dir`` if omitted.

    Returns:
        Configured FastAPI app.
    """
    if settings is None:
        settings = Settings()
    if container is None:
        container = Container(
            settings.data_dir,
            resequence_on_task_delete=settings.resequence_on_task_delete,
        )

    app = FastAPI(
        title="Task Tracker",
        description="Projects, ordered columns, ordered tasks and comments",
        version=__version__,
    )
    app.state.settings = settings
    app.state.container = container

    app.middleware("http")(request_context)
    register_error_handlers(app)

    app.include_router(projects.router)
    app.include_router(columns.router)
    app.include_router(tasks.router)
    app.include_router(comments.router)

    @app.get("/")
    def root() -> dict[str, Any]:
        """Root endpoint."""
        return {
            "name": "tasktracker",
            "version": __version__,
            "status": "running",
        }

    logger.debug("App created with data directory %s", container.database.data_root)
    return app
