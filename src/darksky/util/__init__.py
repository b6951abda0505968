"""
Shared helpers for URL formatting and HTTP error reporting.
"""

from .http import format_request_exception
from .uri import API_URL, format_coordinate, format_time, redact_token, uri, uri_optioned

__all__ = [
    "API_URL",
    "format_coordinate",
    "format_time",
    "format_request_exception",
    "redact_token",
    "uri",
    "uri_optioned",
]
