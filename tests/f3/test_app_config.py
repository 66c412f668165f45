"""Tests for app configuration.

Tests the configuration loading, environment overrides, and defaults.
"""

from pathlib import Path

import pytest

from quizstore.config.app_config import (
    CONFIG_FILE,
    AppConfig,
    ConfigError,
    load_app_config,
)


def _write_config(text: str) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(text, encoding="utf-8")


class TestDefaults:
    """Tests for built-in defaults."""

    def test_defaults_without_file(self):
        """No config file yields the default settings."""
        config = load_app_config()
        assert isinstance(config, AppConfig)
        assert config.database.path == Path("data.sqlite3")
        assert config.server.port == 8000
        assert config.server.host == "0.0.0.0"

    def test_default_seed(self):
        """Default seed is question a with options b and c."""
        seed = load_app_config().seed
        assert seed.body == "a"
        assert [(o.body, o.correct) for o in seed.options] == [("b", True), ("c", False)]

    def test_config_is_cached(self):
        """Second call returns the cached object."""
        assert load_app_config() is load_app_config()


class TestConfigFile:
    """Tests for loading data/config/quizstore.yaml."""

    def test_values_from_yaml(self):
        """File values override defaults."""
        _write_config(
            "database:\n  path: custom.sqlite3\nserver:\n  host: 127.0.0.1\n  port: 9000\n"
        )
        config = load_app_config(force_reload=True)
        assert config.database.path == Path("custom.sqlite3")
        assert config.server.host == "127.0.0.1"
        assert config.server.port == 9000

    def test_missing_sections_use_defaults(self):
        """Partial file keeps defaults for what it omits."""
        _write_config("server:\n  port: 9001\n")
        config = load_app_config(force_reload=True)
        assert config.database.path == Path("data.sqlite3")
        assert config.seed is not None

    def test_null_seed_disables_seeding(self):
        """seed: null means no example question."""
        _write_config("seed: null\n")
        assert load_app_config(force_reload=True).seed is None

    def test_custom_seed(self):
        """Seed question can be configured."""
        _write_config(
            "seed:\n  body: Capital of France?\n  options:\n"
            "    - body: Paris\n      correct: true\n    - body: Lyon\n      correct: false\n"
        )
        seed = load_app_config(force_reload=True).seed
        assert seed.body == "Capital of France?"
        assert [o.body for o in seed.options] == ["Paris", "Lyon"]

    def test_invalid_port_in_file(self):
        """Non-numeric port is rejected."""
        _write_config("server:\n  port: eighty\n")
        with pytest.raises(ConfigError):
            load_app_config(force_reload=True)


class TestEnvOverrides:
    """Tests for PORT and QUIZSTORE_DB_PATH."""

    def test_port_env(self, monkeypatch):
        """PORT overrides the configured port."""
        monkeypatch.setenv("PORT", "5050")
        assert load_app_config(force_reload=True).server.port == 5050

    def test_invalid_port_env(self, monkeypatch):
        """Unparseable PORT raises ConfigError."""
        monkeypatch.setenv("PORT", "not-a-port")
        with pytest.raises(ConfigError):
            load_app_config(force_reload=True)

    def test_out_of_range_port_env(self, monkeypatch):
        """Port must fit in 1-65535."""
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(ConfigError):
            load_app_config(force_reload=True)

    def test_db_path_env(self, monkeypatch, tmp_path):
        """QUIZSTORE_DB_PATH overrides the database path."""
        monkeypatch.setenv("QUIZSTORE_DB_PATH", str(tmp_path / "env.sqlite3"))
        assert load_app_config(force_reload=True).database.path == tmp_path / "env.sqlite3"


class TestInvalidSeed:
    """Malformed seed entries are reported as ConfigError."""

    def test_seed_without_body(self):
        """A seed mapping needs a body."""
        _write_config("seed:\n  options: []\n")
        with pytest.raises(ConfigError):
            load_app_config(force_reload=True)

    def test_seed_option_without_body(self):
        """Every seed option needs a body."""
        _write_config("seed:\n  body: a\n  options:\n    - correct: true\n")
        with pytest.raises(ConfigError):
            load_app_config(force_reload=True)

    def test_seed_not_a_mapping(self):
        """A bare string is not a seed question."""
        _write_config("seed: just text\n")
        with pytest.raises(ConfigError):
            load_app_config(force_reload=True)
