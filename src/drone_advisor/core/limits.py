"""Safe-operating envelope for the supported drone."""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class LimitsProfile:
    """Operating limits for one drone model.

    Attributes:
        name: Drone model name
        wind_max: Maximum sustained wind in km/h
        gust_max: Maximum gust speed in km/h
        temp_min: Minimum operating temperature in degrees Celsius
        temp_max: Maximum operating temperature in degrees Celsius
        rain_max: Maximum acceptable precipitation probability (%)
        cloud_max: Maximum cloud cover before warning (%)
        visibility_min: Minimum visibility in kilometers
        kp_max: Highest recommended planetary Kp index (0-9)
    """
    name: str
    wind_max: float
    gust_max: float
    temp_min: float
    temp_max: float
    rain_max: float
    cloud_max: float
    visibility_min: float
    kp_max: float

    def __post_init__(self):
        if self.temp_min >= self.temp_max:
            raise ValueError(
                f"temp_min must be less than temp_max, got {self.temp_min} >= {self.temp_max}"
            )
        for f in fields(self):
            if f.name in ("name", "temp_min", "temp_max"):
                continue
            value = getattr(self, f.name)
            if value <= 0:
                raise ValueError(f"{f.name} must be positive, got {value}")


DJI_MINI_2 = LimitsProfile(
    name="DJI Mini 2",
    wind_max=29,        # km/h sustained
    gust_max=38,        # km/h
    temp_min=0,
    temp_max=40,
    rain_max=20,        # % probability
    cloud_max=70,       # % cover
    visibility_min=3,   # km
    kp_max=4,
)
