from __future__ import annotations

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from hello_service import __version__
from hello_service.api.routers import root_route
from hello_service.core.config import Settings, get_settings
from hello_service.core.errors import AppError
from hello_service.core.handlers import handle_app_error
from hello_service.core.logging import setup_logging
from hello_service.core.middleware import log_requests


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Application factory for creating FastAPI instances.

    Args:
        settings: Optional settings override. If None, loads from environment.
                  Useful for testing with custom configuration.
    """
    if settings is None:
        settings = get_settings()

    # Generated docs would claim /docs, /redoc and /openapi.json ahead of the catch-all.
    app = FastAPI(
        title="Hello Service",
        description="Greeting and health-check service",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.router.routes.append(root_route)
    app.state.settings = settings

    app.add_middleware(BaseHTTPMiddleware, dispatch=log_requests)
    app.add_exception_handler(AppError, handle_app_error)  # type: ignore[arg-type]

    return app


# Initialize logging once at module load
setup_logging()

# Default app instance for uvicorn (uvicorn hello_service.api.app:app)
app = create_app()
