"""Location handling and place search."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from ..config import AdvisorConfig

logger = logging.getLogger(__name__)

# Queries this short are not worth a suggestion lookup
MIN_SUGGESTION_LENGTH = 3


@dataclass
class Location:
    """Geographic location to evaluate.

    Attributes:
        name: Human-readable location name
        latitude: Latitude in decimal degrees (-90 to 90)
        longitude: Longitude in decimal degrees (-180 to 180)
    """
    name: str
    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.longitude}")

    @classmethod
    def buenos_aires(cls) -> Location:
        """Create the default Location, Buenos Aires."""
        return cls(name="Buenos Aires", latitude=-34.6037, longitude=-58.3816)

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float,
                         name: str | None = None) -> Location:
        """Create a Location from coordinates with optional name."""
        location_name = name or f"Location ({latitude:.4f}, {longitude:.4f})"
        return cls(name=location_name, latitude=latitude, longitude=longitude)


@dataclass
class Place:
    """A place search result.

    Attributes:
        name: Place name
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        admin1: First-level administrative area, if known
        country: Country name, if known
    """
    name: str
    latitude: float
    longitude: float
    admin1: str | None = None
    country: str | None = None

    @property
    def region(self) -> str:
        """Region line shown under a suggestion, e.g. "Córdoba, Argentina"."""
        parts = [p for p in (self.admin1, self.country) if p]
        return ", ".join(parts)

    def to_location(self) -> Location:
        return Location(name=self.name, latitude=self.latitude, longitude=self.longitude)


def search_places(
    query: str,
    count: int = 5,
    config: AdvisorConfig | None = None,
    min_length: int = MIN_SUGGESTION_LENGTH,
) -> list[Place]:
    """Search places by name using the Open-Meteo geocoding API.

    Args:
        query: Free-text place name
        count: Maximum number of results
        config: Endpoint configuration. Defaults to environment settings.
        min_length: Shortest query that triggers a lookup

    Returns:
        Matching places, best first. Empty on short queries or failure.
    """
    query = query.strip()
    if not query or len(query) < min_length:
        return []

    config = config or AdvisorConfig.from_env()
    try:
        response = requests.get(
            config.geocoding_url,
            params={
                "name": query,
                "count": count,
                "language": config.language,
                "format": "json",
            },
            timeout=config.timeout,
        )
        if response.status_code != 200:
            logger.warning(f"Geocoding returned status {response.status_code}")
            return []

        results = response.json().get("results") or []
        return [
            Place(
                name=r["name"],
                latitude=float(r["latitude"]),
                longitude=float(r["longitude"]),
                admin1=r.get("admin1"),
                country=r.get("country"),
            )
            for r in results
        ]

    except requests.RequestException as e:
        logger.warning(f"Geocoding request failed: {e}")
        return []
    except (KeyError, ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Failed to parse geocoding response: {e}")
        return []


def resolve_location(name: str, config: AdvisorConfig | None = None) -> Location | None:
    """Resolve a place name to the best matching Location.

    Args:
        name: Place name (e.g., "Córdoba", "Mendoza")
        config: Endpoint configuration

    Returns:
        Location if found, None otherwise
    """
    places = search_places(name, count=5, config=config, min_length=1)
    if not places:
        logger.info(f"No place found for '{name}'")
        return None
    return places[0].to_location()
