"""
Client library for the DarkSky forecast API.
"""

from importlib import metadata as _metadata

from .errors import (
    DarkskyError,
    DarkskyIOError,
    DecodeError,
    FormatError,
    InvalidUriError,
    TransportError,
)
from .models import Alert, Datablock, Datapoint, Flags, Forecast, Icon, PrecipitationType, Severity, decode, encode
from .options import Block, Language, Options, Unit
from .util.uri import API_URL, uri, uri_optioned
from .api import DarkskyClient, HttpBackend, RequestsBackend, get_forecast

try:
    __version__ = _metadata.version("darksky")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "API_URL",
    "Alert",
    "Block",
    "DarkskyClient",
    "DarkskyError",
    "DarkskyIOError",
    "Datablock",
    "Datapoint",
    "DecodeError",
    "Flags",
    "Forecast",
    "FormatError",
    "HttpBackend",
    "Icon",
    "InvalidUriError",
    "Language",
    "Options",
    "PrecipitationType",
    "RequestsBackend",
    "Severity",
    "TransportError",
    "Unit",
    "decode",
    "encode",
    "get_forecast",
    "uri",
    "uri_optioned",
]
