"""Selection of a single hour from a multi-hour forecast."""

from __future__ import annotations

import math
from collections.abc import Mapping

from .models import HourlyForecast, HourlySample

# Used when no forecast has been loaded at all
FALLBACK_SAMPLE = HourlySample(temp=22, wind=12, gusts=15, clouds=30, rain=5, visibility=10.0)

DEFAULT_VISIBILITY_M = 10000


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _value_at(values, index: int, default: float) -> float:
    if values is None or not 0 <= index < len(values):
        return default
    value = values[index]
    if value is None:
        return default
    try:
        value = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(value):
        return default
    return value


def select_hour(series: HourlyForecast | Mapping | None, hour_index: int) -> HourlySample:
    """Extract one hour's conditions from a forecast.

    The index is clamped to the last available hour. Missing or null
    entries default to 0, except visibility which defaults to 10 km.

    Args:
        series: Forecast arrays, or the raw Open-Meteo ``hourly`` mapping
        hour_index: Requested hour (0 = first forecast hour)

    Returns:
        HourlySample with integer-rounded values and visibility in km
        rounded half-up to one decimal. FALLBACK_SAMPLE if series is None.
    """
    if series is None:
        return FALLBACK_SAMPLE
    if isinstance(series, Mapping):
        series = HourlyForecast.from_open_meteo(series)

    index = max(0, min(hour_index, len(series) - 1))

    visibility_m = _value_at(series.visibility, index, DEFAULT_VISIBILITY_M)
    return HourlySample(
        temp=_round_half_up(_value_at(series.temperature_2m, index, 0)),
        wind=_round_half_up(_value_at(series.windspeed_10m, index, 0)),
        gusts=_round_half_up(_value_at(series.windgusts_10m, index, 0)),
        clouds=_round_half_up(_value_at(series.cloudcover, index, 0)),
        rain=_round_half_up(_value_at(series.precipitation_probability, index, 0)),
        visibility=_round_half_up(visibility_m / 100) / 10,
    )
