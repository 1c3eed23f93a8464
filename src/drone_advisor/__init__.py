"""
Drone Advisor - Weather-aware flight check for small consumer drones.

Fetches the hourly forecast and the planetary Kp index for a location and
evaluates whether conditions are safe to fly a DJI Mini 2, with itemized
reasons for every warning.

Basic Usage:
    from drone_advisor import FlightAdvisor, resolve_location

    # Use default location (Buenos Aires)
    advisor = FlightAdvisor()
    advisor.run()

    # Resolve a named location via geocoding
    cordoba = resolve_location("Córdoba")
    advisor = FlightAdvisor(location=cordoba)
    advisor.run(hour=15)

    # Evaluate conditions directly
    from drone_advisor import HourlySample, GeomagneticReading, evaluate

    sample = HourlySample(temp=20, wind=10, gusts=12, clouds=10, rain=0, visibility=10.0)
    verdict = evaluate(sample, GeomagneticReading.from_value(1.0))
    verdict.safe  # True

CLI Usage:
    drone-advisor check
    drone-advisor --location Córdoba check --hour 15
    drone-advisor outlook
    drone-advisor search "San Carlos"
"""

__version__ = "1.0.0"

# Core types
from drone_advisor.core.limits import DJI_MINI_2, LimitsProfile
from drone_advisor.core.location import Location, Place, resolve_location, search_places

# Evaluation
from drone_advisor.advisor.advisor import FlightAdvisor
from drone_advisor.advisor.evaluator import ConditionDetail, Severity, Verdict, evaluate

# Weather
from drone_advisor.weather.geomagnetic import (
    GeomagneticService,
    NoDataError,
    aggregate_geomagnetic,
)
from drone_advisor.weather.hours import select_hour
from drone_advisor.weather.models import (
    GeomagneticReading,
    HourlyForecast,
    HourlySample,
    KpStatus,
)
from drone_advisor.weather.service import WeatherService

__all__ = [
    # Version
    "__version__",
    # Core
    "LimitsProfile",
    "DJI_MINI_2",
    "Location",
    "Place",
    "resolve_location",
    "search_places",
    # Evaluation
    "evaluate",
    "Verdict",
    "ConditionDetail",
    "Severity",
    "FlightAdvisor",
    # Weather
    "HourlySample",
    "HourlyForecast",
    "GeomagneticReading",
    "KpStatus",
    "select_hour",
    "aggregate_geomagnetic",
    "NoDataError",
    "GeomagneticService",
    "WeatherService",
]
