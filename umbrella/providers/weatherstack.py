"""Weatherstack current-weather provider."""
from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests
from pydantic import BaseModel, ConfigDict, ValidationError

from .base import HttpWeatherProvider
from ..entities import Weather
from ..errors import SchemaError, VendorError
from ..temperature import Temperature


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.weatherstack.com/current"
LOCATION_SEPARATOR = ", "


# Response envelopes -------------------------------------------------------
class _Envelope(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")


class WSError(_Envelope):
    # only ``info`` identifies an error envelope; the rest is informational
    info: str
    code: Any = None
    type: Any = None


class WSErrorResponse(_Envelope):
    error: WSError


class WSLocation(_Envelope):
    name: str
    country: str


class WSCurrent(_Envelope):
    temperature: float
    weather_descriptions: List[str]


class WSWeather(_Envelope):
    location: WSLocation
    current: WSCurrent


def parse_response(body: str) -> Weather:
    """Map a Weatherstack response body to :class:`Weather`.

    The vendor reports some failures (bad key, unknown location) with a 200
    status, so the error envelope is checked before the success one.
    """
    try:
        error = WSErrorResponse.model_validate_json(body)
    except ValidationError:
        pass
    else:
        logger.warning("Weatherstack reported error %s: %s", error.error.code, error.error.info)
        raise VendorError(error.error.info, code=error.error.code, error_type=error.error.type)

    try:
        payload = WSWeather.model_validate_json(body)
    except ValidationError as exc:
        logger.error("Unexpected Weatherstack response: %s", body)
        raise SchemaError(_describe(exc), body) from exc

    descriptions = payload.current.weather_descriptions
    if not descriptions:
        raise SchemaError("current.weather_descriptions is empty", body)
    return Weather(
        location=f"{payload.location.name}{LOCATION_SEPARATOR}{payload.location.country}",
        temperature=Temperature.from_celsius(payload.current.temperature),
        summary=descriptions[0],
    )


def _describe(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"]) or "body"
        problems.append(f"{path}: {err['msg']}")
    return "bad response (" + "; ".join(problems) + ")"


class WeatherstackProvider(HttpWeatherProvider):
    """Integration with the Weatherstack ``/current`` endpoint."""

    name = "weatherstack"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = base_url or DEFAULT_BASE_URL

    def build_request(self, location: str) -> requests.PreparedRequest:
        params = [("query", location), ("access_key", self.api_key)]
        return requests.Request("GET", self.base_url, params=params).prepare()

    def get_weather(self, location: str) -> Weather:
        self._log.debug("Fetching weather for %r", location)
        response = self._send(self.build_request(location))
        return parse_response(response.text)


__all__ = [
    "WeatherstackProvider",
    "parse_response",
    "DEFAULT_BASE_URL",
    "LOCATION_SEPARATOR",
]
