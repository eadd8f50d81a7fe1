"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from shapeguard.config import Settings, get_settings


def test_defaults(monkeypatch) -> None:
    for name in ("SHAPEGUARD_LOG_LEVEL", "SHAPEGUARD_LOG_JSON", "SHAPEGUARD_MESSAGE_LOCALE"):
        monkeypatch.delenv(name, raising=False)
    current = Settings(_env_file=None)
    assert current.LOG_LEVEL == "INFO"
    assert current.LOG_JSON is False
    assert current.MESSAGE_LOCALE == "en"


def test_environment_prefix(monkeypatch) -> None:
    monkeypatch.setenv("SHAPEGUARD_MESSAGE_LOCALE", "zh")
    monkeypatch.setenv("SHAPEGUARD_LOG_JSON", "true")
    monkeypatch.setenv("SHAPEGUARD_LOG_LEVEL", "DEBUG")
    current = Settings(_env_file=None)
    assert current.MESSAGE_LOCALE == "zh"
    assert current.LOG_JSON is True
    assert current.LOG_LEVEL == "DEBUG"


def test_unsupported_locale_rejected(monkeypatch) -> None:
    monkeypatch.setenv("SHAPEGUARD_MESSAGE_LOCALE", "fr")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_no_settings_instance_built_at_import() -> None:
    import shapeguard.config as config

    assert not hasattr(config, "settings")
