"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cachebridge_core.constants import DEFAULT_MEMCACHED_HOST, DEFAULT_SOCKET_TIMEOUT_SECONDS


class Settings(BaseSettings):
    """Central configuration for cachebridge."""

    model_config = SettingsConfigDict(env_prefix="CB_", env_file=".env")

    # --- Memcached ---
    memcached_host: str = Field(
        default=DEFAULT_MEMCACHED_HOST,
        description="Memcached server hostname or IP (port is fixed at 11211)",
    )
    socket_timeout_seconds: float = Field(
        default=DEFAULT_SOCKET_TIMEOUT_SECONDS,
        gt=0,
        description="Socket timeout handed to the memcache client",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level name",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for shipping",
    )

    @field_validator("memcached_host")
    @classmethod
    def validate_memcached_host(cls, value: str) -> str:
        """Reject empty hosts and hosts that carry their own port."""
        value = value.strip()
        if not value:
            msg = "memcached_host must not be empty"
            raise ValueError(msg)
        if ":" in value:
            msg = "memcached_host must not include a port; the port is fixed"
            raise ValueError(msg)
        return value
