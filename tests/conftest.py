from __future__ import annotations

import os

# Settings are read at import time; keep test runs off the log directory.
os.environ.setdefault("LOG_TO_FILE", "false")

import httpx
import pytest

from weatherflow.models.weather_model import ConditionCategory, Coordinates, WeatherRecord




def forecast_payload(code: int = 3, temp: float = 15, temp_max: float = 18, temp_min: float = 10) -> dict:
    return {
        "timezone": "Europe/London",
        "current": {
            "temperature_2m": temp,
            "relative_humidity_2m": 72,
            "apparent_temperature": 13.4,
            "is_day": 1,
            "precipitation": 0.0,
            "weather_code": code,
            "wind_speed_10m": 4.2,
            "pressure_msl": 1012.5,
        },
        "daily": {
            "time": ["2024-05-01", "2024-05-02"],
            "weather_code": [code, 61],
            "temperature_2m_max": [temp_max, 21.0],
            "temperature_2m_min": [temp_min, 12.0],
        },
    }


class RecordingTransport:
    """Wraps httpx.MockTransport and keeps every request it served."""

    def __init__(self, responder) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        self.transport = httpx.MockTransport(handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def london_geocoding_payload() -> dict:
    return {
        "results": [
            {"latitude": 51.5, "longitude": -0.12, "name": "London", "country": "United Kingdom"},
            {"latitude": 42.98, "longitude": -81.25, "name": "London", "country": "Canada"},
        ]
    }


@pytest.fixture
def london_forecast_payload() -> dict:
    return forecast_payload()


@pytest.fixture
def make_transport():
    def factory(responder) -> RecordingTransport:
        return RecordingTransport(responder)

    return factory


@pytest.fixture
def json_transport(make_transport):
    def factory(payload, status_code: int = 200) -> RecordingTransport:
        return make_transport(lambda request: httpx.Response(status_code, json=payload))

    return factory


@pytest.fixture
def london_coords() -> Coordinates:
    return Coordinates(latitude=51.5, longitude=-0.12, display_name="London", country="United Kingdom")


@pytest.fixture
def london_record() -> WeatherRecord:
    return WeatherRecord(
        place_name="London",
        country="United Kingdom",
        temperature=15,
        feels_like=13.4,
        humidity=72,
        pressure_hpa=1012.5,
        temp_max=18,
        temp_min=10,
        wind_speed=4.2,
        condition=ConditionCategory.CLOUDS,
        description="Overcast",
    )


@pytest.fixture
def make_forecast_payload():
    return forecast_payload
