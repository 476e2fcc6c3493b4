"""Unit tests for settings loading."""

import pytest
from pydantic import ValidationError

from quirknotes.config import Settings, get_settings
from quirknotes.main import create_app


def test_defaults(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "from-env")
    settings = Settings(_env_file=None)

    assert settings.secret_key == "from-env"
    assert settings.algorithm == "HS256"
    assert settings.access_token_expire_minutes == 60
    assert settings.password_hash_rounds == 12


def test_secret_key_is_required(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_empty_secret_key_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, secret_key="")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "s")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

    settings = Settings(_env_file=None)
    assert settings.access_token_expire_minutes == 5
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_hash_rounds_bounds():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, secret_key="s", password_hash_rounds=3)


def test_create_app_falls_back_to_cached_settings(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "from-env")
    monkeypatch.setenv("APP_NAME", "Cached Notes")
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
        assert create_app().title == "Cached Notes"
    finally:
        get_settings.cache_clear()
