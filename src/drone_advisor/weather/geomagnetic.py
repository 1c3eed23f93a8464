"""Planetary Kp index retrieval and aggregation."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from urllib.parse import quote

import requests

from ..config import AdvisorConfig
from .models import FALLBACK_READING, GeomagneticReading

logger = logging.getLogger(__name__)

# Number of most recent readings averaged into the current value
RECENT_READINGS = 3


class NoDataError(ValueError):
    """Raised when a Kp series contains no usable readings."""


def _parse_kp(entry) -> float | None:
    if isinstance(entry, (str, bytes)) or not isinstance(entry, (list, tuple)):
        return None
    if len(entry) < 2:
        return None
    try:
        value = float(entry[1])
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def aggregate_geomagnetic(raw_series: Iterable) -> GeomagneticReading:
    """Reduce a Kp time series to a single current reading.

    Args:
        raw_series: Ordered (timestamp, value) pairs; values may be strings,
            numbers, or garbage

    Returns:
        GeomagneticReading from the mean of the last three valid values

    Raises:
        NoDataError: If no entry holds a non-negative number
    """
    values = [v for v in (_parse_kp(entry) for entry in raw_series) if v is not None]
    if not values:
        raise NoDataError("No valid Kp readings in series")

    recent = values[-RECENT_READINGS:]
    return GeomagneticReading.from_value(sum(recent) / len(recent))


def normalize_kp_rows(data) -> list[tuple]:
    """Turn a NOAA SWPC K-index payload into (time_tag, kp) pairs.

    The feed is either a table whose first row is the header, e.g.
    ``[["time_tag", "Kp", ...], ["2024-01-01 00:00:00", "2.33", ...]]``,
    or a list of objects with ``time_tag`` and ``Kp`` keys.
    """
    if not isinstance(data, list) or not data:
        return []

    rows = []
    for i, row in enumerate(data):
        if isinstance(row, Mapping):
            rows.append((row.get("time_tag"), row.get("Kp", row.get("kp_index"))))
        elif isinstance(row, (list, tuple)):
            if i == 0:
                continue  # header
            rows.append(tuple(row[:2]) if len(row) > 1 else tuple(row))
    return rows


class GeomagneticService:
    """Service to get the current planetary Kp index from NOAA SWPC."""

    def __init__(self, config: AdvisorConfig | None = None):
        """Initialize the service.

        Args:
            config: Endpoint configuration. Defaults to environment settings.
        """
        self.config = config or AdvisorConfig.from_env()

    @property
    def feed_url(self) -> str:
        """Kp feed URL, routed through the relay proxy when one is configured."""
        if self.config.kp_proxy_url:
            return self.config.kp_proxy_url + quote(self.config.kp_url, safe="")
        return self.config.kp_url

    def fetch_series(self) -> list[tuple] | None:
        """Fetch raw (time_tag, kp) rows.

        Returns:
            Rows in feed order, or None if the request failed
        """
        try:
            response = requests.get(self.feed_url, timeout=self.config.timeout)
            if response.status_code != 200:
                logger.warning(f"Kp feed returned status {response.status_code}")
                return None
            return normalize_kp_rows(response.json())

        except requests.RequestException as e:
            logger.warning(f"Kp feed request failed: {e}")
            return None
        except ValueError as e:
            logger.warning(f"Failed to parse Kp feed: {e}")
            return None

    def get_reading(self) -> GeomagneticReading:
        """Get the current Kp reading, or the fallback reading if unavailable."""
        series = self.fetch_series()
        if series is None:
            return FALLBACK_READING

        try:
            reading = aggregate_geomagnetic(series)
        except NoDataError:
            logger.warning(f"Kp feed had no valid readings, assuming Kp={FALLBACK_READING.value}")
            return FALLBACK_READING

        logger.debug(f"Kp index loaded: {reading.value:.2f} ({reading.status.value})")
        return reading
