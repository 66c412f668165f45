"""Fixtures for F3 tests - configuration, Web API and CLI."""

import pytest

from quizstore.config.app_config import AppConfig, DatabaseConfig, clear_config_cache
from quizstore.db.bootstrap import DEFAULT_SEED


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test in an empty working directory with no env overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("QUIZSTORE_DB_PATH", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    """Config pointing at a database file inside tmp_path."""
    return AppConfig(
        database=DatabaseConfig(path=tmp_path / "data.sqlite3"),
        seed=DEFAULT_SEED,
    )
