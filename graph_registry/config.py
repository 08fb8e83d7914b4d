"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration.
Every value can be overridden via environment variables:
- GR_API_HOST=127.0.0.1
- GR_API_PORT=9000
- GR_REGISTRY_MAX_GRAPHS=1000
- GR_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APIConfig(BaseSettings):
    """HTTP server configuration.

    Environment variables prefixed with GR_API_.
    """

    model_config = SettingsConfigDict(env_prefix="GR_API_")

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    title: str = "Graph Registry"


class RegistryConfig(BaseSettings):
    """Graph registry limits.

    Environment variables prefixed with GR_REGISTRY_.
    """

    model_config = SettingsConfigDict(env_prefix="GR_REGISTRY_")

    max_graphs: Optional[int] = Field(default=None, ge=1)
    max_edges_per_graph: Optional[int] = Field(default=None, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with GR_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="GR_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.api.port)
        print(config.registry.max_graphs)

    Environment variables prefixed with GR_.
    """

    model_config = SettingsConfigDict(env_prefix="GR_")

    api: APIConfig = Field(default_factory=APIConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
