"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hello_service.core.constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_SERVICE_NAME
from hello_service.schemas.routing import RoutingPolicy


class Settings(BaseSettings):
    """
    Configuration loaded from environment variables.

    Only deployment-specific values belong here. Response bodies and the
    route table live in ``hello_service.core.constants``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # ---------------------------------------------------------------------------
    # Listener
    # ---------------------------------------------------------------------------
    host: str = Field(default=DEFAULT_HOST, validation_alias="HELLO_HOST")
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535, validation_alias="HELLO_PORT")

    # ---------------------------------------------------------------------------
    # Behaviour
    # ---------------------------------------------------------------------------
    service_name: str = Field(default=DEFAULT_SERVICE_NAME, validation_alias="HELLO_SERVICE_NAME")
    routing_policy: RoutingPolicy = Field(default="permissive", validation_alias="HELLO_ROUTING_POLICY")

    # ---------------------------------------------------------------------------
    # Logging
    # ---------------------------------------------------------------------------
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("host", "service_name", mode="before")
    @classmethod
    def _strip_strings(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("routing_policy", mode="before")
    @classmethod
    def _lower_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}/"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
