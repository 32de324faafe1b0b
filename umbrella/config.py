"""Environment-backed settings for the umbrella client."""
from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError
from .providers.weatherstack import DEFAULT_BASE_URL


API_KEY_ENV = "WEATHERSTACK_API_KEY"
BASE_URL_ENV = "UMBRELLA_BASE_URL"
TIMEOUT_ENV = "UMBRELLA_TIMEOUT"
LOG_LEVEL_ENV = "UMBRELLA_LOG_LEVEL"

DEFAULT_TIMEOUT = 1.0
DEFAULT_LOG_LEVEL = "WARNING"


def env(name: str, default: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    source = os.environ if environ is None else environ
    value = source.get(name, default)
    if value is None:
        raise ConfigurationError(f"Environment variable {name} is required")
    return value


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def parse_timeout(value: str) -> float:
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{TIMEOUT_ENV} must be a number, got {value!r}") from exc
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(f"{TIMEOUT_ENV} must be a positive number, got {value!r}")
    return timeout


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from the process environment (or ``environ``)."""
    source = os.environ if environ is None else environ
    return Settings(
        api_key=source.get(API_KEY_ENV) or None,
        base_url=env(BASE_URL_ENV, DEFAULT_BASE_URL, source),
        timeout=parse_timeout(env(TIMEOUT_ENV, str(DEFAULT_TIMEOUT), source)),
        log_level=env(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL, source),
    )


__all__ = [
    "Settings",
    "load_settings",
    "env",
    "parse_timeout",
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "TIMEOUT_ENV",
    "LOG_LEVEL_ENV",
]
