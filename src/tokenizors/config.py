from __future__ import annotations

import logging
import secrets
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Runtime configuration, read from ``TOKENIZORS_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(env_prefix="TOKENIZORS_", env_file=".env", extra="ignore")

    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["https://tokenizors.net", "http://localhost:3000"]
    )
    session_secret: str | None = None
    session_max_age: int = 24 * 60 * 60
    https_only: bool = False
    csrf_enabled: bool = True

    default_encoding: str = "cl100k_base"
    esbuild_path: str = "esbuild"
    es_target: str = "es2020"

    cache_ttl_seconds: float = 60.0
    log_level: str = "INFO"

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    def resolved_session_secret(self) -> str:
        if self.session_secret:
            return self.session_secret
        logger.warning("TOKENIZORS_SESSION_SECRET is not set; sessions will not survive a restart")
        return secrets.token_urlsafe(32)


@lru_cache
def get_settings() -> Settings:
    return Settings()
