from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Runtime configuration resolved from environment variables."""

    port: int = Field(
        default=3004, alias="PORT", description="Port the relay listens on."
    )
    host: str = Field(
        default="0.0.0.0", alias="HOST", description="Interface the relay binds to."
    )
    gateway_url: str = Field(
        default="http://101.47.159.98:18789",
        alias="GATEWAY_URL",
        description="Base URL of the upstream chat gateway.",
    )
    gateway_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        alias="GATEWAY_TIMEOUT_SECONDS",
        description="Upper bound on a single upstream call, in seconds.",
    )
    log_level: str = Field(
        default="INFO", alias="LOG_LEVEL", description="Root logging level."
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def from_env(cls) -> "Settings":
        return cls.model_validate(os.environ)

    @property
    def gateway_chat_url(self) -> str:
        return f"{self.gateway_url.rstrip('/')}/api/chat"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance built from environment variables."""
    return Settings.from_env()
