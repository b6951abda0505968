import json
from typing import List

import pytest
from typer.testing import CliRunner


class FakeBackend:
    """Records requested URLs and returns a canned body."""

    def __init__(self, body: bytes) -> None:
        self.body = body
        self.urls: List[str] = []

    def send(self, url: str) -> bytes:
        self.urls.append(url)
        return self.body


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def forecast_payload() -> dict:
    """
    A trimmed but realistic forecast response.
    """
    return {
        "latitude": 37.8267,
        "longitude": -122.423,
        "timezone": "America/Los_Angeles",
        "offset": -7,
        "currently": {
            "time": 1509993277,
            "summary": "Drizzle",
            "icon": "rain",
            "nearestStormDistance": 0,
            "precipIntensity": 0.0089,
            "precipIntensityError": 0.0046,
            "precipProbability": 0.9,
            "precipType": "rain",
            "temperature": 66.1,
            "apparentTemperature": 66.31,
            "dewPoint": 60.77,
            "humidity": 0.83,
            "pressure": 1010.34,
            "windSpeed": 5.59,
            "windGust": 12.03,
            "windBearing": 246,
            "cloudCover": 0.7,
            "uvIndex": 1,
            "visibility": 9.84,
            "ozone": 267.44,
        },
        "minutely": {
            "summary": "Light rain stopping in 13 min., starting again 30 min. later.",
            "icon": "rain",
            "data": [
                {"time": 1509993240, "precipIntensity": 0.007, "precipIntensityError": 0.004, "precipProbability": 0.84, "precipType": "rain"},
                {"time": 1509993300, "precipIntensity": 0, "precipProbability": 0},
            ],
        },
        "hourly": {
            "summary": "Rain starting later this afternoon.",
            "icon": "rain",
            "data": [
                {"time": 1509991200, "summary": "Mostly Cloudy", "icon": "partly-cloudy-day", "temperature": 65.76},
            ],
        },
        "daily": {
            "summary": "Mixed precipitation throughout the week.",
            "icon": "rain",
            "data": [
                {
                    "time": 1509944400,
                    "summary": "Rain starting in the afternoon.",
                    "icon": "rain",
                    "sunriseTime": 1509967519,
                    "sunsetTime": 1510004929,
                    "moonPhase": 0.59,
                    "precipIntensityMax": 0.0264,
                    "precipIntensityMaxTime": 1510002000,
                    "temperatureHigh": 66.35,
                    "temperatureHighTime": 1509994800,
                    "temperatureLow": 41.28,
                    "temperatureLowTime": 1510056000,
                    "uvIndexTime": 1509991200,
                }
            ],
        },
        "alerts": [
            {
                "title": "Flood Watch for Mason, WA",
                "time": 1509993360,
                "expires": 1510036680,
                "description": "...FLOOD WATCH REMAINS IN EFFECT THROUGH LATE MONDAY NIGHT...",
                "uri": "https://alerts.weather.gov/cap/wwacapget.php?x=WA1255E4DB8494.FloodWatch.1255E4DCE35CWA.SEWFFASEW.38e78ec64613478bb70fc6ed9c87f6e6",
                "regions": ["Mason"],
                "severity": "watch",
            }
        ],
        "flags": {
            "sources": ["meteoalarm", "cmc", "gfs"],
            "isd-stations": ["724937-23230", "745039-99999"],
            "units": "us",
            "some-new-flag": True,
        },
        "unknownTopLevel": {"ignored": 1},
    }


@pytest.fixture
def forecast_body(forecast_payload: dict) -> bytes:
    return json.dumps(forecast_payload).encode("utf-8")


@pytest.fixture
def fake_backend(forecast_body: bytes) -> FakeBackend:
    return FakeBackend(forecast_body)
