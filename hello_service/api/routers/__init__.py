"""API routers."""

from hello_service.api.routers.root import root_route

__all__ = ["root_route"]
