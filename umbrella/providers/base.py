from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import PreparedRequest, Response

from ..errors import HttpStatusError, QuotaExceeded, RequestTimeout, TransportError


@dataclass(frozen=True)
class RequestConfig:
    timeout: float = 1.0


class HttpWeatherProvider:
    """Base class that sends a single request with a fixed timeout.

    There are no retries: every failure is raised to the caller as one of the
    typed provider errors.
    """

    name = "http"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Quota exceeded: %s", response.text)
            raise QuotaExceeded(response.status_code)
        if not 200 <= response.status_code < 300:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise HttpStatusError(response.status_code)
        return response

    def _send(self, request: PreparedRequest) -> Response:
        try:
            response = self.session.send(request, timeout=self.request_config.timeout)
        except requests.Timeout as exc:
            self._log.error("Request timed out after %ss", self.request_config.timeout)
            raise RequestTimeout(f"request timed out after {self.request_config.timeout}s") from exc
        except requests.RequestException as exc:
            # the exception text carries the full URL, api key included
            self._log.error("Request failed: %s", exc.__class__.__name__)
            raise TransportError(f"request failed ({exc.__class__.__name__})") from exc
        return self._handle_response(response)


__all__ = ["HttpWeatherProvider", "RequestConfig"]
