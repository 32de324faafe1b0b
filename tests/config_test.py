from __future__ import annotations

import logging

import pytest

from umbrella.config import Settings, env, load_settings, parse_timeout
from umbrella.errors import ConfigurationError
from umbrella.logging_setup import coerce_level, setup_logging
from umbrella.providers.weatherstack import DEFAULT_BASE_URL


def test_load_settings_defaults():
    settings = load_settings({})

    assert settings == Settings(
        api_key=None,
        base_url=DEFAULT_BASE_URL,
        timeout=1.0,
        log_level="WARNING",
    )


def test_load_settings_from_environment():
    settings = load_settings(
        {
            "WEATHERSTACK_API_KEY": "abc123",
            "UMBRELLA_BASE_URL": "http://localhost:8080/current",
            "UMBRELLA_TIMEOUT": "2.5",
            "UMBRELLA_LOG_LEVEL": "debug",
        }
    )

    assert settings.api_key == "abc123"
    assert settings.base_url == "http://localhost:8080/current"
    assert settings.timeout == 2.5
    assert settings.log_level == "debug"


def test_empty_api_key_is_treated_as_missing():
    assert load_settings({"WEATHERSTACK_API_KEY": ""}).api_key is None


@pytest.mark.parametrize("value", ["soon", "0", "-1", "", "nan", "inf"])
def test_invalid_timeout(value):
    with pytest.raises(ConfigurationError, match="UMBRELLA_TIMEOUT"):
        parse_timeout(value)


def test_env_requires_value_without_default():
    with pytest.raises(ConfigurationError, match="MISSING_VAR"):
        env("MISSING_VAR", environ={})
    assert env("MISSING_VAR", "fallback", environ={}) == "fallback"


def test_coerce_level():
    assert coerce_level("debug") == logging.DEBUG
    assert coerce_level(" WARNING ") == logging.WARNING
    assert coerce_level("15") == 15
    assert coerce_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        coerce_level("chatty")
    with pytest.raises(ValueError):
        coerce_level("  ")


def test_setup_logging_uses_its_argument_and_caps_urllib3(monkeypatch):
    monkeypatch.setenv("UMBRELLA_LOG_LEVEL", "ERROR")
    root = logging.getLogger()
    urllib3_logger = logging.getLogger("urllib3")
    previous = root.level, urllib3_logger.level
    try:
        setup_logging("DEBUG")
        assert root.level == logging.DEBUG
        assert urllib3_logger.level == logging.INFO

        setup_logging("ERROR")
        assert urllib3_logger.level == logging.ERROR
    finally:
        root.setLevel(previous[0])
        urllib3_logger.setLevel(previous[1])
