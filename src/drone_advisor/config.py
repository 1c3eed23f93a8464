"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
DEFAULT_KP_URL = "https://services.swpc.noaa.gov/products/noaa-planetary-k-index.json"
DEFAULT_TIMEOUT = 10.0


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


@dataclass
class AdvisorConfig:
    """Endpoints and request settings for the data providers.

    Attributes:
        forecast_url: Open-Meteo hourly forecast endpoint
        geocoding_url: Open-Meteo place search endpoint
        kp_url: NOAA SWPC planetary K-index feed
        kp_proxy_url: Optional relay prefix; the feed URL is appended URL-encoded
        timeout: Request timeout in seconds
        language: Language for place search results
        forecast_days: Days of hourly forecast to request
    """
    forecast_url: str = DEFAULT_FORECAST_URL
    geocoding_url: str = DEFAULT_GEOCODING_URL
    kp_url: str = DEFAULT_KP_URL
    kp_proxy_url: str = ""
    timeout: float = DEFAULT_TIMEOUT
    language: str = "es"
    forecast_days: int = 2

    @classmethod
    def from_env(cls, **kwargs) -> AdvisorConfig:
        """Create config from environment variables.

        Environment variables:
            DRONE_ADVISOR_FORECAST_URL: Forecast endpoint
            DRONE_ADVISOR_GEOCODING_URL: Geocoding endpoint
            DRONE_ADVISOR_KP_URL: Kp index feed
            DRONE_ADVISOR_KP_PROXY: Relay prefix for the Kp feed (e.g. a CORS proxy)
            DRONE_ADVISOR_TIMEOUT: Request timeout in seconds
            DRONE_ADVISOR_LANGUAGE: Geocoding result language
        """
        values = {
            "forecast_url": os.getenv("DRONE_ADVISOR_FORECAST_URL", DEFAULT_FORECAST_URL),
            "geocoding_url": os.getenv("DRONE_ADVISOR_GEOCODING_URL", DEFAULT_GEOCODING_URL),
            "kp_url": os.getenv("DRONE_ADVISOR_KP_URL", DEFAULT_KP_URL),
            "kp_proxy_url": os.getenv("DRONE_ADVISOR_KP_PROXY", ""),
            "timeout": _float_from_env("DRONE_ADVISOR_TIMEOUT", DEFAULT_TIMEOUT),
            "language": os.getenv("DRONE_ADVISOR_LANGUAGE", "es"),
        }
        values.update(kwargs)
        return cls(**values)
