from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from hello_service.core.errors import AppError
from hello_service.core.logging import log_context

logger = logging.getLogger(__name__)


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    # Log only server-side failures here.
    if exc.status_code >= 500:
        request_id = getattr(request.state, "request_id", None)
        with log_context(request_id=request_id, method=request.method, path=request.url.path):
            logger.error(
                "%s",
                exc.detail,
                extra={
                    "error_code": exc.code,
                    "status_code": exc.status_code,
                    "error_type": type(exc).__name__,
                },
            )
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())
