"""Unit-safe temperature value type.

Values are stored in Celsius and every conversion is routed through it, so
there is a single pair of formulas per unit and no pairwise drift.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict


ZERO_CELSIUS_IN_KELVIN = 273.15


class Unit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS: Dict[Unit, str] = {
    Unit.CELSIUS: "ºC",
    Unit.FAHRENHEIT: "ºF",
    Unit.KELVIN: "K",
}

_TO_CELSIUS: Dict[Unit, Callable[[float], float]] = {
    Unit.CELSIUS: lambda value: value,
    Unit.FAHRENHEIT: lambda value: (value - 32) / 1.8,
    Unit.KELVIN: lambda value: value - ZERO_CELSIUS_IN_KELVIN,
}

_FROM_CELSIUS: Dict[Unit, Callable[[float], float]] = {
    Unit.CELSIUS: lambda value: value,
    Unit.FAHRENHEIT: lambda value: value * 1.8 + 32,
    Unit.KELVIN: lambda value: value + ZERO_CELSIUS_IN_KELVIN,
}


def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """Convert ``value`` between units via Celsius."""
    return _FROM_CELSIUS[to_unit](_TO_CELSIUS[from_unit](float(value)))


@dataclass(frozen=True)
class Temperature:
    """A temperature reading, held internally in degrees Celsius."""

    _celsius: float

    @classmethod
    def from_unit(cls, value: float, unit: Unit) -> "Temperature":
        return cls(_TO_CELSIUS[unit](float(value)))

    @classmethod
    def from_celsius(cls, value: float) -> "Temperature":
        return cls.from_unit(value, Unit.CELSIUS)

    @classmethod
    def from_fahrenheit(cls, value: float) -> "Temperature":
        return cls.from_unit(value, Unit.FAHRENHEIT)

    @classmethod
    def from_kelvin(cls, value: float) -> "Temperature":
        return cls.from_unit(value, Unit.KELVIN)

    def to(self, unit: Unit) -> float:
        return _FROM_CELSIUS[unit](self._celsius)

    @property
    def celsius(self) -> float:
        return self.to(Unit.CELSIUS)

    @property
    def fahrenheit(self) -> float:
        return self.to(Unit.FAHRENHEIT)

    @property
    def kelvin(self) -> float:
        return self.to(Unit.KELVIN)

    def format(self, unit: Unit = Unit.CELSIUS) -> str:
        """Render the value in ``unit`` without rounding, e.g. ``11ºC``."""
        return f"{format_number(self.to(unit))}{unit.symbol}"


def format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return str(value)


__all__ = ["Temperature", "Unit", "convert", "format_number", "ZERO_CELSIUS_IN_KELVIN"]
