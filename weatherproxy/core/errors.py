"""Errors raised while serving a temperature feel request.

Every error carries a ``message`` that is safe to return to the caller. The
underlying cause, if any, is chained and only ever logged.
"""
from __future__ import annotations

INTERNAL_ERROR_MESSAGE = "internal server error"


class WeatherFeelError(RuntimeError):
    """Base error converted into an error response by the API layer."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(WeatherFeelError):
    """Raised when the caller's query parameters are missing or malformed."""


class UpstreamError(WeatherFeelError):
    """Raised when the weather provider answered with a handled error body."""


class InternalError(WeatherFeelError):
    """Raised for transport and decoding failures; the detail stays in the logs."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)


__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "WeatherFeelError",
    "ValidationError",
    "UpstreamError",
    "InternalError",
]
