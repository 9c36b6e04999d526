from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok"]
    uptime: float = Field(ge=0)
    timestamp: datetime
    service: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "ok",
                    "uptime": 12.34,
                    "timestamp": "2024-01-01T00:00:00.000000Z",
                    "service": "hello-world",
                }
            ]
        }
    }
