"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a working default; only PORT is expected from the platform
    - get_settings() is cached (lru_cache), single instance per process
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vehicle_api.core.domain_types import Locale
from vehicle_api.infrastructure.data_gov_client import (
    DEFAULT_BASE_URL, DEFAULT_RESOURCE_ID, DEFAULT_USER_AGENT,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 3000
    environment: str = "development"
    shutdown_grace_seconds: int = 10

    # Upstream (data.gov.il)
    upstream_base_url: str = DEFAULT_BASE_URL
    upstream_resource_id: str = DEFAULT_RESOURCE_ID
    upstream_timeout_seconds: float = 15.0
    upstream_user_agent: str = DEFAULT_USER_AGENT

    @field_validator("upstream_timeout_seconds")
    @classmethod
    def timeout_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("upstream_timeout_seconds must be > 0")
        return v

    # API
    message_locale: Locale = Locale.HE
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
