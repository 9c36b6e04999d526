"""Path classification for the request router.

Matching is exact string equality against a small ordered list of patterns:
health aliases first, then the root path, then the policy's catch-all.
"""

from __future__ import annotations

from collections.abc import Collection

from hello_service.core.constants import HEALTH_PATHS, ROOT_PATH
from hello_service.schemas.routing import RouteKind, RoutingPolicy


def classify(
    path: str,
    policy: RoutingPolicy = "permissive",
    *,
    health_paths: Collection[str] = HEALTH_PATHS,
) -> RouteKind:
    if path in health_paths:
        return "health"
    if path == ROOT_PATH or policy == "permissive":
        return "greeting"
    return "not_found"
