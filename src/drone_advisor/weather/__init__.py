"""Weather and geomagnetic data acquisition."""

from .geomagnetic import GeomagneticService, NoDataError, aggregate_geomagnetic
from .hours import FALLBACK_SAMPLE, select_hour
from .models import (
    FALLBACK_READING,
    GeomagneticReading,
    HourlyForecast,
    HourlySample,
    KpStatus,
)
from .service import WeatherService, fallback_forecast

__all__ = [
    "HourlySample",
    "HourlyForecast",
    "GeomagneticReading",
    "KpStatus",
    "FALLBACK_READING",
    "FALLBACK_SAMPLE",
    "select_hour",
    "aggregate_geomagnetic",
    "NoDataError",
    "GeomagneticService",
    "WeatherService",
    "fallback_forecast",
]
