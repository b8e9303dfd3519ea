"""Tests for settings."""

import pytest
from pydantic import ValidationError

from tagsearch.config import Settings
from tagsearch.errors import ConfigurationError


def test_defaults(monkeypatch):
    monkeypatch.delenv("BEARER_TOKEN", raising=False)
    settings = Settings(_env_file=None)

    assert settings.bearer_token is None
    assert settings.max_results == 100
    assert settings.rate_limit_capacity == 300
    assert settings.rate_limit_refill == 300
    assert settings.rate_limit_interval_seconds == 900
    assert settings.page_delay_seconds == 1.0


def test_token_from_environment(monkeypatch):
    monkeypatch.setenv("BEARER_TOKEN", "from-env")

    settings = Settings(_env_file=None)

    assert settings.bearer_token == "from-env"
    settings.validate_api_keys()


def test_missing_token(monkeypatch):
    monkeypatch.delenv("BEARER_TOKEN", raising=False)

    with pytest.raises(ConfigurationError):
        Settings(_env_file=None).validate_api_keys()


def test_non_ascii_token():
    with pytest.raises(ConfigurationError):
        Settings(_env_file=None, bearer_token="tøken").validate_api_keys()


def test_settings_are_immutable():
    settings = Settings(_env_file=None, bearer_token="abc")

    with pytest.raises(ValidationError):
        settings.bearer_token = "other"
