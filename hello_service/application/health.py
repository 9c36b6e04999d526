from __future__ import annotations

import logging
import time
from datetime import UTC, datetime

from hello_service.core.constants import HEALTH_STATUS_OK
from hello_service.schemas.health import HealthResponse

# Captured once at import; never reassigned.
_START_TIME = time.monotonic()

logger = logging.getLogger(__name__)


def uptime_seconds() -> float:
    return time.monotonic() - _START_TIME


async def health_status(service_name: str) -> HealthResponse:
    uptime = uptime_seconds()
    logger.debug("health check ok", extra={"uptime_seconds": round(uptime, 2)})
    return HealthResponse(
        status=HEALTH_STATUS_OK,
        uptime=uptime,
        timestamp=datetime.now(UTC),
        service=service_name,
    )
