"""Application configuration loader.

Loads configuration from data/config/quizstore.yaml, falling back to
built-in defaults. PORT and QUIZSTORE_DB_PATH environment variables
override the file.

Usage:
    from quizstore.config.app_config import load_app_config

    config = load_app_config()
    service = QuestionService(config.database.path)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

from quizstore.core.models import AddQuestion

logger = structlog.get_logger(__name__)

# Config file path (relative to working directory)
CONFIG_FILE = Path("data/config/quizstore.yaml")

PORT_ENV = "PORT"
DB_PATH_ENV = "QUIZSTORE_DB_PATH"


class ConfigError(ValueError):
    """Invalid configuration value."""

    pass


@dataclass
class DatabaseConfig:
    """SQLite database settings."""

    path: Path = Path("data.sqlite3")


@dataclass
class ServerConfig:
    """HTTP listener settings."""

    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class AppConfig:
    """Application-wide configuration."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    seed: AddQuestion | None = None


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "database": {"path": "data.sqlite3"},
        "server": {"host": "0.0.0.0", "port": 8000},
        "seed": {
            "body": "a",
            "options": [
                {"body": "b", "correct": True},
                {"body": "c", "correct": False},
            ],
        },
    }


def _parse_port(value: Any, source: str) -> int:
    try:
        port = int(str(value), 10)
    except ValueError as e:
        raise ConfigError(f"Invalid port from {source}: {value!r}") from e
    if not 0 < port < 65536:
        raise ConfigError(f"Port out of range from {source}: {port}")
    return port


def _parse_seed(seed_data: Any) -> AddQuestion:
    try:
        return AddQuestion.from_dict(seed_data)
    except (KeyError, TypeError, AttributeError) as e:
        raise ConfigError(f"Invalid seed question in config: {e!r}") from e


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    defaults = _get_defaults()

    db_data = data.get("database") or {}
    database = DatabaseConfig(
        path=Path(db_data.get("path", defaults["database"]["path"])),
    )

    server_data = data.get("server") or {}
    server = ServerConfig(
        host=server_data.get("host", defaults["server"]["host"]),
        port=_parse_port(server_data.get("port", defaults["server"]["port"]), "config"),
    )

    # An explicit `seed: null` disables seeding
    seed_data = data["seed"] if "seed" in data else defaults["seed"]
    seed = _parse_seed(seed_data) if seed_data else None

    return AppConfig(database=database, server=server, seed=seed)


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    """Apply environment variable overrides."""
    if (port := os.environ.get(PORT_ENV)) is not None:
        config.server.port = _parse_port(port, PORT_ENV)
        logger.debug("config.env_override", key=PORT_ENV, value=config.server.port)

    if db_path := os.environ.get(DB_PATH_ENV):
        config.database.path = Path(db_path)
        logger.debug("config.env_override", key=DB_PATH_ENV, value=db_path)

    return config


def load_app_config(force_reload: bool = False) -> AppConfig:
    """Load application config.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        AppConfig object with all settings.

    Raises:
        ConfigError: If a value (e.g. PORT) cannot be parsed
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    data: dict[str, Any]

    if CONFIG_FILE.exists():
        logger.debug("loading_app_config", source=str(CONFIG_FILE))
        data = yaml.safe_load(CONFIG_FILE.read_text(encoding="utf-8")) or {}
    else:
        logger.info("using_default_config")
        data = _get_defaults()

    _cached_config = _apply_env_overrides(_parse_config(data))
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
