from __future__ import annotations

from fastapi import Request

from hello_service.core.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with (see ``create_app``)."""

    return request.app.state.settings
