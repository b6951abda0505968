"""
HTTP client for the DarkSky forecast endpoint.
"""

from .client import DEFAULT_TIMEOUT_SECONDS, DarkskyClient, HttpBackend, RequestsBackend, get_forecast

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "DarkskyClient",
    "HttpBackend",
    "RequestsBackend",
    "get_forecast",
]
