import io
import json

import pytest

from darksky.errors import DarkskyIOError, DecodeError
from darksky.models import Forecast, Icon, PrecipitationType, Severity, decode, encode

MINIMAL = '{"latitude":37.8267,"longitude":-122.423,"timezone":"America/Los_Angeles"}'


def test_minimal_payload_decodes_with_absent_blocks() -> None:
    forecast = decode(MINIMAL)

    assert forecast.latitude == 37.8267
    assert forecast.longitude == -122.423
    assert forecast.timezone == "America/Los_Angeles"
    assert forecast.alerts == []
    assert forecast.currently is None
    assert forecast.minutely is None
    assert forecast.hourly is None
    assert forecast.daily is None
    assert forecast.flags is None
    assert forecast.offset is None


def test_full_payload_decodes(forecast_body: bytes) -> None:
    forecast = decode(forecast_body)

    current = forecast.currently
    assert current is not None
    assert current.time == 1509993277
    assert current.icon is Icon.RAIN
    assert current.precip_type is PrecipitationType.RAIN
    assert current.wind_bearing == 246.0
    assert current.uv_index == 1
    assert current.sunrise_time is None

    assert forecast.minutely is not None and forecast.minutely.data is not None
    assert len(forecast.minutely.data) == 2
    assert forecast.daily is not None
    day = forecast.daily.data[0]
    assert day.moon_phase == 0.59
    assert day.temperature_low_time == 1510056000

    assert forecast.alerts[0].severity is Severity.WATCH
    assert forecast.alerts[0].regions == ["Mason"]
    assert forecast.flags is not None
    assert forecast.flags.isd_stations == ["724937-23230", "745039-99999"]
    assert forecast.flags.units == "us"


def test_zero_is_not_confused_with_absent(forecast_body: bytes) -> None:
    forecast = decode(forecast_body)
    second_minute = forecast.minutely.data[1]

    assert forecast.currently.nearest_storm_distance == 0.0
    assert second_minute.precip_intensity == 0.0
    assert second_minute.precip_type is None
    assert second_minute.precip_intensity_error is None


def test_explicit_null_is_absent() -> None:
    payload = json.loads(MINIMAL)
    payload["currently"] = {"time": 1, "temperature": None}

    forecast = decode(json.dumps(payload))

    assert forecast.currently.temperature is None


def test_decode_accepts_streams(forecast_body: bytes) -> None:
    from_bytes = decode(io.BytesIO(forecast_body))
    from_text = decode(io.StringIO(forecast_body.decode("utf-8")))

    assert from_bytes == from_text == decode(forecast_body)


def test_decode_wraps_stream_failures() -> None:
    class _BrokenStream:
        def read(self) -> bytes:
            raise OSError("connection reset")

    with pytest.raises(DarkskyIOError, match="connection reset"):
        decode(_BrokenStream())


def test_unknown_severity_is_a_decode_error(forecast_payload: dict) -> None:
    forecast_payload["alerts"][0]["severity"] = "unknown-level"

    with pytest.raises(DecodeError) as excinfo:
        decode(json.dumps(forecast_payload))

    assert excinfo.value.value == "unknown-level"
    assert "severity" in excinfo.value.description


def test_unknown_icon_is_a_decode_error(forecast_payload: dict) -> None:
    forecast_payload["hourly"]["icon"] = "meteor-shower"

    with pytest.raises(DecodeError) as excinfo:
        decode(json.dumps(forecast_payload))

    assert excinfo.value.value == "meteor-shower"


def test_string_where_number_expected_is_a_decode_error() -> None:
    payload = json.loads(MINIMAL)
    payload["currently"] = {"time": 1509993277, "temperature": "66.1"}

    with pytest.raises(DecodeError) as excinfo:
        decode(json.dumps(payload))

    assert excinfo.value.value == "66.1"
    assert "temperature" in excinfo.value.description


def test_missing_datapoint_time_is_a_decode_error() -> None:
    payload = json.loads(MINIMAL)
    payload["currently"] = {"temperature": 50.0}

    with pytest.raises(DecodeError, match="time"):
        decode(json.dumps(payload))


def test_missing_timezone_is_a_decode_error() -> None:
    with pytest.raises(DecodeError, match="timezone"):
        decode('{"latitude": 1.0, "longitude": 2.0}')


def test_invalid_json_is_a_decode_error() -> None:
    with pytest.raises(DecodeError):
        decode(b"<html>502 Bad Gateway</html>")


def test_encode_then_decode_is_lossless(forecast_body: bytes) -> None:
    forecast = decode(forecast_body)

    assert decode(encode(forecast)) == forecast


def test_encode_uses_wire_names_and_omits_absent_fields(forecast_body: bytes) -> None:
    encoded = json.loads(encode(decode(forecast_body)))

    assert encoded["currently"]["precipType"] == "rain"
    assert "sunriseTime" not in encoded["currently"]
    assert encoded["flags"]["isd-stations"] == ["724937-23230", "745039-99999"]
    assert "unknownTopLevel" not in encoded


def test_models_can_be_built_by_field_name() -> None:
    forecast = Forecast(latitude=1.0, longitude=2.0, timezone="UTC", currently={"time": 5, "wind_speed": 3.5})

    assert forecast.currently.wind_speed == 3.5
    assert json.loads(encode(forecast))["currently"] == {"time": 5, "windSpeed": 3.5}
