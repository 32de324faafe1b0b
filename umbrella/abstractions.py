"""Core abstractions for the weather domain."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from .entities import Weather


@runtime_checkable
class Provider(Protocol):
    """A data source capable of returning the current weather for a location."""

    name: str

    def get_weather(self, location: str) -> Weather:
        """Fetch the current weather for a free-form location string.

        Raises a :class:`umbrella.errors.ProviderError` subclass on failure.
        """
        ...


__all__ = ["Provider"]
