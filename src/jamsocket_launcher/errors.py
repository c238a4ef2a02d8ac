"""Exceptions raised by the Jamsocket launcher."""
from __future__ import annotations

from typing import Optional


class JamsocketError(RuntimeError):
    """Base class for every launcher failure."""


class ConfigurationError(JamsocketError):
    """Raised when a required setting is missing or a setting is malformed."""

    def __init__(self, variable: str, message: str) -> None:
        super().__init__(message)
        self.variable = variable


class HttpStatusError(JamsocketError):
    """Raised when the API or backend answers with a non-2xx status."""

    def __init__(self, status_code: int, url: str, detail: Optional[str] = None) -> None:
        message = f"Request to {url} failed with status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.detail = detail


class InvalidResponseError(JamsocketError):
    """Raised when a response body is not the JSON shape we expect."""


class RequestFailedError(JamsocketError):
    """Raised when a request never produced a response (DNS, refused, reset, timeout)."""


class ReadyTimeoutError(JamsocketError):
    """Raised when the backend does not report Ready before the deadline."""
