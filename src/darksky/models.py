"""
Pydantic models for forecast responses and the JSON decoder.

Every measurement is optional because data sources have gaps; an absent field
stays `None` and is never replaced by zero.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import IO, Any, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import DarkskyIOError, DecodeError

logger = logging.getLogger(__name__)


class Icon(str, Enum):
    """Machine-readable weather summary, suitable for picking a symbol."""

    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    CLOUDY = "cloudy"
    FOG = "fog"
    HAIL = "hail"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"
    TORNADO = "tornado"
    WIND = "wind"


class PrecipitationType(str, Enum):
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"


class Severity(str, Enum):
    """Severity of a weather alert, from least to most urgent."""

    ADVISORY = "advisory"
    WATCH = "watch"
    WARNING = "warning"


def _to_kebab(name: str) -> str:
    return name.replace("_", "-")


class Alert(BaseModel):
    """
    A severe weather warning issued for the forecast location.

    Attributes:
        expires: Unix time at which the alert expires.
        description: Detailed description of the alert.
        title: Short summary.
        uri: Link to the full alert text.
        regions: Names of the regions covered.
        time: Unix time at which the alert was issued.
        severity: How urgent the alert is.
    """
    expires: int
    description: str
    title: str
    uri: str
    regions: List[str]
    time: int
    severity: Severity


class Datapoint(BaseModel):
    """
    One time-stamped observation or prediction.

    Only `time` is mandatory. The `*_error` fields are standard deviations of the
    associated value; `*_time` fields are Unix timestamps. Daily-only fields
    (sunrise, highs and lows, moon phase) are absent from other blocks.
    """
    apparent_temperature: Optional[float] = None
    apparent_temperature_max: Optional[float] = None
    apparent_temperature_max_time: Optional[int] = None
    apparent_temperature_min: Optional[float] = None
    apparent_temperature_min_time: Optional[int] = None
    cloud_cover: Optional[float] = None
    cloud_cover_error: Optional[float] = None
    dew_point: Optional[float] = None
    dew_point_error: Optional[float] = None
    humidity: Optional[float] = None
    humidity_error: Optional[float] = None
    icon: Optional[Icon] = None
    moon_phase: Optional[float] = None
    nearest_storm_bearing: Optional[float] = None
    nearest_storm_distance: Optional[float] = None
    ozone: Optional[float] = None
    ozone_error: Optional[float] = None
    precip_accumulation: Optional[float] = None
    precip_accumulation_error: Optional[float] = None
    precip_intensity: Optional[float] = None
    precip_intensity_error: Optional[float] = None
    precip_intensity_max: Optional[float] = None
    precip_intensity_max_error: Optional[float] = None
    precip_intensity_max_time: Optional[int] = None
    precip_probability: Optional[float] = None
    precip_probability_error: Optional[float] = None
    precip_type: Optional[PrecipitationType] = None
    pressure: Optional[float] = None
    pressure_error: Optional[float] = None
    summary: Optional[str] = None
    sunrise_time: Optional[int] = None
    sunset_time: Optional[int] = None
    temperature: Optional[float] = None
    temperature_error: Optional[float] = None
    temperature_high: Optional[float] = None
    temperature_high_time: Optional[int] = None
    temperature_low: Optional[float] = None
    temperature_low_time: Optional[int] = None
    temperature_max: Optional[float] = None
    temperature_max_error: Optional[float] = None
    temperature_max_time: Optional[int] = None
    temperature_min: Optional[float] = None
    temperature_min_error: Optional[float] = None
    temperature_min_time: Optional[int] = None
    time: int
    uv_index: Optional[int] = None
    uv_index_time: Optional[int] = None
    visibility: Optional[float] = None
    visibility_error: Optional[float] = None
    wind_bearing: Optional[float] = None
    wind_bearing_error: Optional[float] = None
    wind_gust: Optional[float] = None
    wind_gust_time: Optional[int] = None
    wind_speed: Optional[float] = None
    wind_speed_error: Optional[float] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class Datablock(BaseModel):
    """Datapoints for one time granularity plus an overall summary."""
    data: Optional[List[Datapoint]] = None
    icon: Optional[Icon] = None
    summary: Optional[str] = None


class Flags(BaseModel):
    """Metadata about the sources and units used for a forecast."""
    darksky_stations: Optional[List[str]] = None
    darksky_unavailable: Optional[str] = None
    datapoint_stations: Optional[List[str]] = None
    isd_stations: Optional[List[str]] = None
    lamp_stations: Optional[List[str]] = None
    metar_stations: Optional[List[str]] = None
    metno_license: Optional[str] = None
    sources: Optional[List[str]] = None
    units: Optional[str] = None

    model_config = {
        "alias_generator": _to_kebab,
        "populate_by_name": True,
    }


class Forecast(BaseModel):
    """
    A full forecast response.

    Blocks are optional because they can be excluded with `Options.exclude`.

    Attributes:
        latitude: Latitude of the forecast location.
        longitude: Longitude of the forecast location.
        timezone: IANA timezone name of the location.
        offset: Current UTC offset in hours.
        currently: Current conditions.
        minutely: Minute-by-minute data for the next hour.
        hourly: Hour-by-hour data (two days, or seven with `extend_hourly`).
        daily: Day-by-day data for the week.
        alerts: Active severe weather alerts (empty when none were sent).
        flags: Source and unit metadata.
    """
    latitude: float
    longitude: float
    timezone: str
    offset: Optional[float] = None
    currently: Optional[Datapoint] = None
    minutely: Optional[Datablock] = None
    hourly: Optional[Datablock] = None
    daily: Optional[Datablock] = None
    alerts: List[Alert] = Field(default_factory=list)
    flags: Optional[Flags] = None


Body = Union[bytes, bytearray, str, IO[bytes], IO[str]]


def decode(body: Body) -> Forecast:
    """
    Decode a forecast response body.

    Args:
        body: The raw JSON as bytes or text, or a readable stream.

    Returns:
        The decoded Forecast.

    Raises:
        DarkskyIOError: If reading the stream fails.
        DecodeError: If the body is not valid JSON or does not match the schema.
    """
    if isinstance(body, (bytes, bytearray, str)):
        payload = body
    else:
        try:
            payload = body.read()
        except OSError as exc:
            raise DarkskyIOError(f"Failed to read forecast body: {exc}") from exc

    try:
        return Forecast.model_validate_json(payload, strict=True)
    except ValidationError as exc:
        raise _decode_error(exc) from exc


def encode(forecast: Forecast, *, indent: Optional[int] = None) -> str:
    """Render a Forecast back to the API's JSON shape, omitting absent fields."""
    return forecast.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def _decode_error(exc: ValidationError) -> DecodeError:
    """Turn the first validation failure into a DecodeError."""
    errors = exc.errors(include_url=False)
    if not errors:
        return DecodeError("Invalid forecast payload", None)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    description = f"{location}: {message}" if location else message
    value: Any = first.get("input")
    if len(errors) > 1:
        logger.debug("Forecast payload had %s validation errors: %s", len(errors), exc)
    return DecodeError(description, value)


__all__ = [
    "Icon",
    "PrecipitationType",
    "Severity",
    "Alert",
    "Datapoint",
    "Datablock",
    "Flags",
    "Forecast",
    "decode",
    "encode",
]
