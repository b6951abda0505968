"""
Request URL formatting for the forecast endpoint.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Mapping, Optional, Union

import numpy as np

from ..errors import FormatError
from ..options import Options

API_URL = "https://api.darksky.net"
DEFAULT_QUERY = "units=auto"

TimeValue = Union[int, str, datetime]


def format_coordinate(value: float) -> str:
    """
    Render a coordinate the way the API parses it.

    Uses the shortest digits that round-trip, always positional, with integral
    values printed without a fractional part (37.0 -> "37", 1e-07 -> "0.0000001").
    """
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise FormatError(f"Coordinate must be a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise FormatError(f"Coordinate must be finite, got {number!r}")
    return np.format_float_positional(number, unique=True, trim="-")


def format_time(value: TimeValue) -> str:
    """
    Render a time-machine timestamp.

    Integers are Unix seconds, strings are passed through untouched, and datetimes
    become `YYYY-MM-DDTHH:MM:SS` with a `Z` or `+HHMM` suffix when timezone-aware.
    """
    if isinstance(value, bool):
        raise FormatError(f"Unsupported time value {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        rendered = value.strftime("%Y-%m-%dT%H:%M:%S")
        offset = value.utcoffset()
        if offset is None:
            return rendered
        if offset == timedelta(0):
            return f"{rendered}Z"
        return f"{rendered}{value.strftime('%z')}"
    raise FormatError(f"Unsupported time value of type {type(value).__name__}")


def uri(token: str, latitude: float, longitude: float, *, base_url: str = API_URL) -> str:
    """
    Format the URL for a forecast without options.

    The API is asked to pick units for the location (`units=auto`).
    """
    return (
        f"{base_url}/forecast/{token}/"
        f"{format_coordinate(latitude)},{format_coordinate(longitude)}?{DEFAULT_QUERY}"
    )


def uri_optioned(
    token: str,
    latitude: float,
    longitude: float,
    options: Union[Options, Mapping[str, str], None] = None,
    time: Optional[TimeValue] = None,
    *,
    base_url: str = API_URL,
) -> str:
    """
    Format the URL for a forecast with explicit options.

    Every option is written as `key=value&`, including the last one. Values are
    not percent-encoded. No default unit is injected on this path.

    Args:
        token: DarkSky API token.
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
        options: An Options builder or an already rendered parameter mapping.
        time: Optional time-machine timestamp, inserted after the coordinates.
        base_url: API root without a trailing slash.

    Returns:
        The request URL.

    Raises:
        FormatError: If a coordinate or the time value cannot be rendered.
    """
    if options is None:
        params: Mapping[str, str] = {}
    elif isinstance(options, Options):
        params = options.into_inner()
    else:
        params = options

    parts = [
        base_url,
        "/forecast/",
        token,
        "/",
        format_coordinate(latitude),
        ",",
        format_coordinate(longitude),
    ]
    if time is not None:
        parts.extend([",", format_time(time)])
    parts.append("?")
    for key, value in params.items():
        parts.append(f"{key}={value}&")
    return "".join(parts)


def redact_token(url: str, token: str) -> str:
    """Hide the API token in a URL before it is logged."""
    if not token:
        return url
    return url.replace(f"/forecast/{token}/", "/forecast/***/")


__all__ = [
    "API_URL",
    "DEFAULT_QUERY",
    "format_coordinate",
    "format_time",
    "uri",
    "uri_optioned",
    "redact_token",
]
