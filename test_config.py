#!/usr/bin/env python3
"""
Tests for environment-driven configuration.
"""

import pytest

from utils import Config, get_config, reload_config


@pytest.fixture(autouse=True)
def fresh_config():
    reload_config()
    yield
    reload_config()


def test_defaults(monkeypatch):
    for name in ("CHEFS_DB_PATH", "CHEFS_DEFAULT_PAGE_SIZE", "CHEFS_MAX_PAGE_SIZE", "CHEFS_PORT"):
        monkeypatch.delenv(name, raising=False)
    config = Config.from_environment()
    assert config.database_path == "chefs_table.db"
    assert config.default_page_size == 10
    assert config.max_page_size == 100
    assert config.port == 8080
    assert not config.is_in_memory_database()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CHEFS_DB_PATH", ":memory:")
    monkeypatch.setenv("CHEFS_MAX_PAGE_SIZE", "25")
    monkeypatch.setenv("CHEFS_SEED_DATA", "TRUE")
    monkeypatch.setenv("CHEFS_LOG_FILE", str(tmp_path / "logs" / "app.log"))

    config = get_config()

    assert config.is_in_memory_database()
    assert config.max_page_size == 25
    assert config.seed_sample_data
    assert (tmp_path / "logs").is_dir()


def test_get_config_is_cached_until_reload(monkeypatch, tmp_path):
    monkeypatch.setenv("CHEFS_LOG_FILE", str(tmp_path / "app.log"))
    monkeypatch.setenv("CHEFS_PORT", "9000")
    first = get_config()
    monkeypatch.setenv("CHEFS_PORT", "9001")
    assert get_config() is first

    reload_config()
    assert get_config().port == 9001


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
