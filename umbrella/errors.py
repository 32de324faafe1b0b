"""Error taxonomy for weather providers."""
from __future__ import annotations

from typing import Any, Optional


class ProviderError(RuntimeError):
    """Base provider error."""


class TransportError(ProviderError):
    """Raised when the request could not be sent or the connection failed."""


class RequestTimeout(TransportError):
    """Raised when the provider did not answer within the request timeout."""


class HttpStatusError(ProviderError):
    """Raised when the provider answers with a non-success status code."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code


class QuotaExceeded(HttpStatusError):
    """Raised when a provider reports a quota/usage limit issue."""

    def __init__(self, status_code: int = 429) -> None:
        super().__init__(status_code, "quota exceeded")


class VendorError(ProviderError):
    """Raised when the vendor reports an application error inside the body."""

    def __init__(
        self,
        message: str,
        code: Any = None,
        error_type: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.error_type = error_type


class SchemaError(ProviderError):
    """Raised when the response body does not match the expected shape."""

    def __init__(self, detail: str, raw: str) -> None:
        super().__init__(f"{detail}: {raw}")
        self.detail = detail
        self.raw = raw


class ConfigurationError(RuntimeError):
    """Raised when settings cannot be loaded from the environment."""


__all__ = [
    "ProviderError",
    "TransportError",
    "RequestTimeout",
    "HttpStatusError",
    "QuotaExceeded",
    "VendorError",
    "SchemaError",
    "ConfigurationError",
]
