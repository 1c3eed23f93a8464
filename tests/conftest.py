"""Shared fixtures for the drone-advisor test suite."""

from unittest.mock import MagicMock

import pytest

from drone_advisor.config import AdvisorConfig
from drone_advisor.weather.models import GeomagneticReading, HourlyForecast, HourlySample


@pytest.fixture
def safe_sample():
    """Conditions well inside every limit."""
    return HourlySample(temp=20, wind=10, gusts=12, clouds=10, rain=0, visibility=10.0)


@pytest.fixture
def calm_kp():
    """Quiet geomagnetic conditions, below the informational band."""
    return GeomagneticReading.from_value(1.0)


@pytest.fixture
def config():
    """Config with defaults, independent of the environment."""
    return AdvisorConfig()


@pytest.fixture
def hourly_payload():
    """Open-Meteo style ``hourly`` object for 24 calm hours."""
    return {
        "time": [f"2024-05-01T{h:02d}:00" for h in range(24)],
        "temperature_2m": [20.4] * 24,
        "windspeed_10m": [9.6] * 24,
        "windgusts_10m": [12.2] * 24,
        "cloudcover": [10] * 24,
        "precipitation_probability": [0] * 24,
        "visibility": [24140.0] * 24,
    }


@pytest.fixture
def calm_forecast(hourly_payload):
    return HourlyForecast.from_open_meteo(hourly_payload)


@pytest.fixture
def make_response():
    """Factory for stand-ins of requests.Response."""
    def _make(payload=None, status_code=200):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = payload
        return response
    return _make
