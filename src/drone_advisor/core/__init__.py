"""Core data structures: drone limits and locations."""

from .limits import DJI_MINI_2, LimitsProfile
from .location import (
    Location,
    Place,
    resolve_location,
    search_places,
)

__all__ = [
    # Limits
    "LimitsProfile",
    "DJI_MINI_2",
    # Location
    "Location",
    "Place",
    "resolve_location",
    "search_places",
]
