"""Configuration package for the question store."""

from quizstore.config.app_config import (
    AppConfig,
    ConfigError,
    DatabaseConfig,
    ServerConfig,
    clear_config_cache,
    load_app_config,
)

__all__ = [
    "AppConfig",
    "ConfigError",
    "DatabaseConfig",
    "ServerConfig",
    "clear_config_cache",
    "load_app_config",
]
