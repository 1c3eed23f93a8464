"""Weather service for fetching hourly flight conditions."""

from __future__ import annotations

import logging

import requests

from ..config import AdvisorConfig
from ..core.location import Location
from .models import HOURLY_FIELDS, HourlyForecast

logger = logging.getLogger(__name__)


def fallback_forecast() -> HourlyForecast:
    """Synthetic 24-hour forecast shown when live data cannot be loaded."""
    return HourlyForecast(
        temperature_2m=list(range(22, -2, -1)),
        windspeed_10m=[12] * 24,
        windgusts_10m=[15] * 24,
        cloudcover=[30] * 24,
        precipitation_probability=[5] * 24,
        visibility=[10000] * 24,
    )


class WeatherService:
    """Service to get hourly forecasts from Open-Meteo.

    Open-Meteo needs no API key. Returns None when the forecast cannot
    be retrieved so callers can decide how to degrade.
    """

    def __init__(
        self,
        location: Location | None = None,
        config: AdvisorConfig | None = None
    ):
        """Initialize the weather service.

        Args:
            location: Target location. Defaults to Buenos Aires.
            config: Endpoint configuration. Defaults to environment settings.
        """
        self.location = location or Location.buenos_aires()
        self.config = config or AdvisorConfig.from_env()

    def get_forecast(self) -> HourlyForecast | None:
        """Get the hourly forecast for the next days.

        Returns:
            HourlyForecast or None if retrieval failed
        """
        params = {
            "latitude": self.location.latitude,
            "longitude": self.location.longitude,
            "hourly": ",".join(HOURLY_FIELDS),
            "timezone": "auto",
            "forecast_days": self.config.forecast_days,
        }
        logger.debug(f"Loading forecast for {self.location.name}: {params}")

        try:
            response = requests.get(
                self.config.forecast_url,
                params=params,
                timeout=self.config.timeout
            )
            if response.status_code != 200:
                logger.warning(f"Forecast returned status {response.status_code}")
                return None

            hourly = response.json()["hourly"]
            forecast = HourlyForecast.from_open_meteo(hourly)

        except requests.RequestException as e:
            logger.warning(f"Forecast request failed: {e}")
            return None
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Failed to parse forecast response: {e}")
            return None

        if len(forecast) == 0:
            logger.warning("Forecast response contained no hours")
            return None
        return forecast
