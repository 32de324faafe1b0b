"""Logging configuration shared by the CLI and library callers."""
from __future__ import annotations

import logging
import sys
from typing import Union


__all__ = ["setup_logging", "coerce_level"]


_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def coerce_level(value: Union[str, int]) -> int:
    """Translate a string/int log level to the corresponding numeric value."""
    if isinstance(value, int):
        return value

    candidate = value.strip()
    if not candidate:
        raise ValueError("Log level cannot be empty")

    if candidate.isdigit():
        return int(candidate)

    level = logging.getLevelName(candidate.upper())
    if isinstance(level, int):
        return level

    raise ValueError(f"Unknown log level: {value}")


def setup_logging(level: Union[str, int] = "WARNING") -> None:
    """Configure the root logger.

    Records go to stderr so that stdout only carries the rendered weather.
    ``urllib3`` is held at INFO or above: its debug records carry the full
    request URL, API key included.
    """

    resolved_level = coerce_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)

    formatter = logging.Formatter(fmt=_DEFAULT_FORMAT)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    else:
        for handler in root_logger.handlers:
            handler.setLevel(resolved_level)
            handler.setFormatter(formatter)

    logging.getLogger("urllib3").setLevel(max(resolved_level, logging.INFO))
    logging.captureWarnings(True)
