"""HTTP middleware for request tracing and request logging."""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from userhub.presentation.api.logging_config import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log its start and completion.

    The id is taken from the X-Request-ID header when present and
    non-blank, otherwise a new UUID4 is generated. It is stored on
    ``request.state``, exposed to log records through a context variable,
    and echoed in the response header.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER, "").strip()
        if not request_id:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        start_time = time.perf_counter()

        logger.info("Request started: %s %s", request.method, request.url.path)
        try:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    "Request failed: %s %s (%.1f ms)",
                    request.method,
                    request.url.path,
                    (time.perf_counter() - start_time) * 1000,
                )
                raise

            logger.info(
                "Request completed: %s %s -> %d (%.1f ms)",
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - start_time) * 1000,
            )
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
