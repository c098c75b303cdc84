"""
Application settings using Pydantic.

Provides environment-based configuration loading with SLORULES_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_CONFIG_FILE = "prometheus-slo.yaml"


class Settings(BaseSettings):
    """Application settings."""

    # SLO config file read when --config is not given
    config_file: str = DEFAULT_CONFIG_FILE

    # Base directory for relative destination paths
    output_dir: str | None = None

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "SLORULES_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
