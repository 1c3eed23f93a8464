"""Weather and geomagnetic data models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

# Open-Meteo hourly variables, in request order
HOURLY_FIELDS = (
    "temperature_2m",
    "windspeed_10m",
    "windgusts_10m",
    "cloudcover",
    "precipitation_probability",
    "visibility",
)


@dataclass(frozen=True)
class HourlySample:
    """Conditions for a single forecast hour.

    Attributes:
        temp: Temperature in degrees Celsius
        wind: Sustained wind speed in km/h
        gusts: Gust speed in km/h
        clouds: Cloud cover percentage (0-100)
        rain: Precipitation probability percentage (0-100)
        visibility: Visibility in kilometers
    """
    temp: float
    wind: float
    gusts: float
    clouds: float
    rain: float
    visibility: float


@dataclass
class HourlyForecast:
    """Multi-hour forecast as parallel per-hour arrays.

    Each list is indexed by hour 0..N-1. Entries may be None where the
    provider has no value. Visibility is in meters, as delivered.
    """
    temperature_2m: list = field(default_factory=list)
    windspeed_10m: list = field(default_factory=list)
    windgusts_10m: list = field(default_factory=list)
    cloudcover: list = field(default_factory=list)
    precipitation_probability: list = field(default_factory=list)
    visibility: list = field(default_factory=list)
    time: list[str] = field(default_factory=list)

    @classmethod
    def from_open_meteo(cls, hourly: Mapping) -> HourlyForecast:
        """Build from the ``hourly`` object of an Open-Meteo response."""
        return cls(
            **{name: list(hourly.get(name) or []) for name in HOURLY_FIELDS},
            time=list(hourly.get("time") or []),
        )

    def __len__(self) -> int:
        return len(self.temperature_2m)

    def hour_label(self, index: int) -> str:
        """Format an hour as ``HH:00``, using the forecast timestamps when present."""
        if 0 <= index < len(self.time):
            stamp = self.time[index]
            # ISO-8601 local time, e.g. "2024-05-01T13:00"
            if "T" in stamp:
                return stamp.split("T", 1)[1][:5]
        return f"{index % 24:02d}:00"


class KpStatus(Enum):
    """Coarse geomagnetic activity bands."""

    LOW = "bajo"
    MODERATE = "moderado"
    HIGH = "alto"
    STORM = "tormenta"

    @classmethod
    def from_value(cls, value: float) -> KpStatus:
        if value <= 3:
            return cls.LOW
        elif value <= 5:
            return cls.MODERATE
        elif value <= 7:
            return cls.HIGH
        else:
            return cls.STORM


@dataclass(frozen=True)
class GeomagneticReading:
    """Representative planetary Kp index value.

    Attributes:
        value: Kp index, conventionally 0-9 (not clamped)
        status: Activity band derived from value
    """
    value: float
    status: KpStatus

    @classmethod
    def from_value(cls, value: float) -> GeomagneticReading:
        return cls(value=value, status=KpStatus.from_value(value))


# Assumed when the Kp feed is unreachable or empty
FALLBACK_KP = 2.0
FALLBACK_READING = GeomagneticReading(value=FALLBACK_KP, status=KpStatus.LOW)
