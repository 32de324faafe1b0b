from __future__ import annotations

from dataclasses import dataclass

from .temperature import Temperature, Unit


@dataclass(frozen=True)
class Weather:
    """Current weather conditions for a location.

    ``location`` is display-ready, e.g. ``"London, United Kingdom"``.
    """

    location: str
    temperature: Temperature
    summary: str

    def render(self, unit: Unit = Unit.CELSIUS) -> str:
        return f"{self.summary} {self.temperature.format(unit)} ({self.location})"

    def __str__(self) -> str:
        return self.render()


__all__ = ["Weather"]
