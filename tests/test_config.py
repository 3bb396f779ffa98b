"""Tests for Settings loading and validation."""

import pytest
from pydantic import ValidationError

from movie_api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_name == "Movie API"
    assert settings.backend_port == 8000
    assert settings.log_level == "INFO"
    assert settings.cors_origins_list == ["http://localhost:3000"]


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings(_env_file=None).log_level == "DEBUG"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError, match="Invalid log_level"):
        Settings(_env_file=None)


def test_cors_origins_split(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")

    assert Settings(_env_file=None).cors_origins_list == ["http://a.example", "http://b.example"]


def test_port_range(monkeypatch):
    monkeypatch.setenv("BACKEND_PORT", "80")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
