"""Shared test fixtures for hello_service."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from hello_service.api.app import create_app
from hello_service.core.config import Settings, get_settings

_ENV_VARS = (
    "HELLO_HOST",
    "HELLO_PORT",
    "HELLO_SERVICE_NAME",
    "HELLO_ROUTING_POLICY",
    "LOG_LEVEL",
    "LOG_COLOR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> Iterator[None]:
    """Isolate every test from the caller's environment and any local .env file."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    def _make(**overrides: Any) -> Settings:
        return Settings(_env_file=None).model_copy(update=overrides)

    return _make


@pytest.fixture
def client(make_settings: Callable[..., Settings]) -> Iterator[TestClient]:
    with TestClient(create_app(make_settings())) as test_client:
        yield test_client


@pytest.fixture
def strict_client(make_settings: Callable[..., Settings]) -> Iterator[TestClient]:
    with TestClient(create_app(make_settings(routing_policy="strict"))) as test_client:
        yield test_client
