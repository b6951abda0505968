"""Exceptions raised by the DarkSky client."""

from __future__ import annotations

from typing import Any, Optional

import requests


class DarkskyError(Exception):
    """Base exception for all DarkSky client errors."""
    pass


class InvalidUriError(DarkskyError):
    """The formatted request URL was rejected by the HTTP client."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class FormatError(DarkskyError):
    """The request URL could not be rendered from the supplied values."""
    pass


class TransportError(DarkskyError):
    """The HTTP request failed or returned an error status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        response: Optional[requests.Response] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class DecodeError(DarkskyError):
    """
    The response body did not match the forecast schema.

    Attributes:
        description: What the decoder expected at the failing location.
        value: The raw value found in the payload.
    """

    def __init__(self, description: str, value: Any = None) -> None:
        super().__init__(description)
        self.description = description
        self.value = value

    def __str__(self) -> str:
        return f"{self.description} (got {self.value!r})"


class DarkskyIOError(DarkskyError):
    """Reading the response stream failed."""
    pass


__all__ = [
    "DarkskyError",
    "InvalidUriError",
    "FormatError",
    "TransportError",
    "DecodeError",
    "DarkskyIOError",
]
