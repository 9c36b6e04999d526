from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from hello_service.core.logging import log_context

REQUEST_ID_HEADER = "X-Request-Id"

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next: RequestResponseEndpoint) -> Response:
    start = time.perf_counter()
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    request.state.request_id = request_id

    with log_context(request_id=request_id, method=request.method, path=request.url.path):
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
