"""Mapping of error kinds to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import ConflictError, NotFoundError, TaskTrackerError

logger = logging.getLogger(__name__)


def status_code_for(error: Exception) -> int:
    """HTTP status for an error kind."""
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, ConflictError):
        return status.HTTP_409_CONFLICT
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=code, content={"code": code, "message": message})


async def _handle_tasktracker_error(request: Request, exc: TaskTrackerError) -> JSONResponse:
    code = status_code_for(exc)
    if code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "%s %s failed [%s]",
            request.method,
            request.url.path,
            getattr(request.state, "request_id", "-"),
            exc_info=exc,
        )
        return error_response(code, "internal server error")
    return error_response(code, str(exc))


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # An unparsable ID in the URL cannot name an existing item
    if any((err.get("loc") or ("",))[0] == "path" for err in errors):
        return error_response(status.HTTP_404_NOT_FOUND, "item is not found")
    if any(err.get("type") == "json_invalid" for err in errors):
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "malformed request body")
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ())[1:])}: {err.get('msg')}"
        for err in errors
    )
    return error_response(status.HTTP_400_BAD_REQUEST, f"validation: {message}")


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an app."""
    app.add_exception_handler(TaskTrackerError, _handle_tasktracker_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
