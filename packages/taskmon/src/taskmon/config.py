"""taskmon configuration with sensible defaults for a local Redis."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict
from shared.keys import DEFAULT_KEY_PREFIX

logger = logging.getLogger(__name__)

# Config file looked up in the home directory when --config is not given
DEFAULT_CONFIG_FILENAME = ".taskmon.env"


class Settings(BaseSettings):
    """
    taskmon configuration.

    All settings can be overridden via environment variables with TASKMON_ prefix.
    Defaults point at a local Redis - no configuration needed to get started.
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKMON_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Redis server URI: "host:port" or a redis:// URL
    uri: str = "127.0.0.1:6379"
    db: int = 0
    password: str | None = None

    # Key namespace used by the task-queue backend
    prefix: str = DEFAULT_KEY_PREFIX

    # Connection-level timeouts enforced by the Redis client
    socket_timeout: float = 5.0
    socket_connect_timeout: float = 5.0

    @property
    def is_url(self) -> bool:
        """Check if uri is a full Redis URL rather than host:port."""
        return "://" in self.uri

    def redis_kwargs(self) -> dict[str, Any]:
        """Resolve connection parameters for the Redis client."""
        kwargs: dict[str, Any] = {
            "db": self.db,
            "password": self.password or None,
            "socket_timeout": self.socket_timeout,
            "socket_connect_timeout": self.socket_connect_timeout,
        }
        if self.is_url:
            return kwargs

        host, sep, port = self.uri.rpartition(":")
        if not sep:
            host, port = self.uri, "6379"
        kwargs["host"] = host or "127.0.0.1"
        kwargs["port"] = int(port)
        return kwargs


def default_config_file() -> Path | None:
    """Return the home-directory config file if one exists."""
    candidate = Path.home() / DEFAULT_CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_settings(config_file: Path | None = None, **overrides: Any) -> Settings:
    """
    Build settings for one CLI invocation.

    Precedence: explicit overrides > environment > config file > defaults.
    Overrides set to None are ignored so unset CLI flags fall through.
    """
    env_file = config_file or default_config_file()
    if env_file is not None:
        logger.debug(f"Using config file: {env_file}")

    explicit = {key: value for key, value in overrides.items() if value is not None}
    return Settings(_env_file=env_file, **explicit)  # type: ignore[call-arg]

