"""Request ID and access logging middleware."""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response, status

from .errors import error_response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"


async def request_context(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Tag each request with an ID and log how it went.

    An incoming ``X-Request-Id`` header is reused, otherwise a new one is
    generated; either way it is echoed on the response. Errors no handler
    claimed become a JSON 500 so they carry the header and the access log too.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request.state.request_id = request_id
    started = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception:
        logger.exception(
            "%s %s raised an unhandled error [%s]", request.method, request.url.path, request_id
        )
        response = error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error")

    elapsed_ms = (time.perf_counter() - started) * 1000
    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        "%s %s -> %d (%.1f ms) [%s]",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
        request_id,
    )
    return response
