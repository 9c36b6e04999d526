from __future__ import annotations

from typing import Any

from hello_service.core.constants import NOT_FOUND_MESSAGE


class AppError(Exception):
    """Base class for all application errors."""

    status_code = 500
    code = "internal_error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def to_content(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.detail}}


class NotFoundError(AppError):
    """Requested resource does not exist (404)."""

    status_code = 404
    code = "not_found"


class RouteNotFoundError(NotFoundError):
    """No route claims the request path under strict routing (404)."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No route for path {path!r}.")
        self.path = path

    def to_content(self) -> dict[str, Any]:
        return {"error": NOT_FOUND_MESSAGE, "path": self.path}
