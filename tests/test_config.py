"""Tests for custdb.config."""

import pytest
from pydantic import ValidationError

from custdb.config import Settings, get_settings
from custdb.database.connection import ConnectionProvider


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove config-related env vars and ignore any local .env file."""
    for key in ("DATABASE_URL", "DATABASE_USERNAME", "DATABASE_PASSWORD", "APP_DEBUG"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setitem(Settings.model_config, "env_file", None)


def test_defaults():
    settings = get_settings()

    assert settings.database_url == "sqlite:///./data/customers.db"
    assert settings.database_username is None
    assert settings.database_password is None
    assert settings.app_debug is False


def test_loads_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://db.internal:5432/app")
    monkeypatch.setenv("DATABASE_USERNAME", "app")
    monkeypatch.setenv("DATABASE_PASSWORD", "s3cret")
    monkeypatch.setenv("APP_DEBUG", "true")

    settings = get_settings()

    assert settings.database_url == "postgresql+psycopg2://db.internal:5432/app"
    assert settings.database_username == "app"
    assert settings.database_password == "s3cret"
    assert settings.app_debug is True


def test_env_names_are_case_insensitive(monkeypatch):
    monkeypatch.setenv("database_username", "lower")
    assert get_settings().database_username == "lower"


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./from-env.db")
    settings = get_settings(database_url="sqlite:///./override.db")
    assert settings.database_url == "sqlite:///./override.db"


def test_invalid_url_rejected():
    with pytest.raises(ValidationError, match="database_url"):
        get_settings(database_url="not a url")


def test_empty_url_rejected():
    with pytest.raises(ValidationError):
        get_settings(database_url="")


def test_settings_are_frozen():
    settings = get_settings()
    with pytest.raises(ValidationError):
        settings.database_url = "sqlite:///./other.db"


def test_password_hidden_from_repr():
    settings = get_settings(database_password="s3cret")
    assert "s3cret" not in repr(settings)


def test_provider_from_settings():
    settings = get_settings(
        database_url="postgresql+psycopg2://db.internal:5432/app",
        database_username="app",
        database_password="s3cret",
    )

    provider = ConnectionProvider.from_settings(settings)

    assert provider.url.username == "app"
    assert provider.url.password == "s3cret"
    assert provider.url.host == "db.internal"
    assert provider.url.database == "app"
