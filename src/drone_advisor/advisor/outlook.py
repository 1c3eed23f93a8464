"""Hour-by-hour flight outlook."""

from __future__ import annotations

import logging

import pandas as pd

from ..core.limits import DJI_MINI_2, LimitsProfile
from ..weather.hours import select_hour
from ..weather.models import GeomagneticReading, HourlyForecast
from .evaluator import evaluate
from .presentation import banner_state

logger = logging.getLogger(__name__)

OUTLOOK_COLUMNS = [
    "Hour",
    "Temp (°C)",
    "Wind (km/h)",
    "Gusts (km/h)",
    "Clouds (%)",
    "Rain (%)",
    "Visibility (km)",
    "Status",
    "Dangers",
    "Warnings",
]


def hourly_outlook(
    forecast: HourlyForecast,
    geo: GeomagneticReading,
    limits: LimitsProfile = DJI_MINI_2,
    hours: int | None = None,
) -> pd.DataFrame:
    """Evaluate every forecast hour.

    Args:
        forecast: Hourly forecast arrays
        geo: Current geomagnetic reading, applied to every hour
        limits: Drone operating limits
        hours: Limit to the first N hours

    Returns:
        DataFrame with one row per hour and the columns in OUTLOOK_COLUMNS
    """
    count = len(forecast) if hours is None else min(hours, len(forecast))
    logger.debug(f"Evaluating {count} forecast hours")

    rows = []
    for index in range(count):
        sample = select_hour(forecast, index)
        verdict = evaluate(sample, geo, limits)
        rows.append({
            "Hour": forecast.hour_label(index),
            "Temp (°C)": sample.temp,
            "Wind (km/h)": sample.wind,
            "Gusts (km/h)": sample.gusts,
            "Clouds (%)": sample.clouds,
            "Rain (%)": sample.rain,
            "Visibility (km)": sample.visibility,
            "Status": banner_state(verdict).name,
            "Dangers": len(verdict.danger_messages),
            "Warnings": len(verdict.warning_messages),
        })

    return pd.DataFrame(rows, columns=OUTLOOK_COLUMNS)


def flyable_hours(outlook: pd.DataFrame) -> list[str]:
    """Hours with no danger, in forecast order."""
    return outlook.loc[outlook["Dangers"] == 0, "Hour"].tolist()
