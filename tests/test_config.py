from __future__ import annotations

import pytest

from gym.core import config as core_config


@pytest.fixture(autouse=True)
def _fresh_settings():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("APP_ENV", "DATABASE_URL", "LOG_LEVEL", "SQL_ECHO"):
        monkeypatch.delenv(name, raising=False)

    settings = core_config.get_settings()

    assert settings.app_env == "dev"
    assert settings.database_url == "sqlite:///gym.db"
    assert settings.log_level == "WARNING"
    assert settings.sql_echo is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "PROD")
    monkeypatch.setenv("DATABASE_URL", " postgresql+psycopg://gym@localhost/gym ")
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("SQL_ECHO", "yes")

    settings = core_config.get_settings()

    assert settings.app_env == "prod"
    assert settings.database_url == "postgresql+psycopg://gym@localhost/gym"
    assert settings.log_level == "INFO"
    assert settings.sql_echo is True
