"""Settings: defaults, env overrides, validation."""

import pytest
from pydantic import ValidationError

from users_api.config import Settings, get_settings


def test_defaults_listen_on_8080(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.addr == "0.0.0.0:8080"


def test_env_overrides_are_case_insensitive(monkeypatch):
    monkeypatch.setenv("port", "9090")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    settings = Settings(_env_file=None)
    assert settings.port == 9090
    assert settings.log_format == "json"


def test_invalid_port_rejected(monkeypatch):
    monkeypatch.setenv("PORT", "70000")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_unknown_log_format_rejected(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
