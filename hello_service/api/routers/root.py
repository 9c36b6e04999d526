from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from hello_service.api.deps.settings import get_app_settings
from hello_service.application.health import health_status
from hello_service.application.routing import classify
from hello_service.core.constants import GREETING_BODY
from hello_service.core.errors import RouteNotFoundError


def request_path(request: Request) -> str:
    """Path as sent on the wire: still percent-encoded, without the query string."""

    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    return raw_path.split(b"?", 1)[0].decode("latin-1")


async def dispatch(request: Request) -> Response:
    settings = get_app_settings(request)
    path = request_path(request)
    kind = classify(path, settings.routing_policy)

    if kind == "health":
        health = await health_status(settings.service_name)
        return JSONResponse(content=health.model_dump(mode="json"))
    if kind == "greeting":
        return PlainTextResponse(GREETING_BODY)
    raise RouteNotFoundError(path)


class RootEndpoint:
    """ASGI endpoint for every path and every method.

    Starlette only restricts methods for function endpoints, so a plain ASGI
    callable keeps the method out of routing entirely.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = await dispatch(Request(scope, receive))
        await response(scope, receive, send)


root_route = Route("/{path:path}", endpoint=RootEndpoint(), name="root", include_in_schema=False)
