from __future__ import annotations

from typing import Literal

RoutingPolicy = Literal["permissive", "strict"]

RouteKind = Literal["health", "greeting", "not_found"]
