"""Internal value objects shared by the fare pipeline"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A (latitude, longitude) pair in decimal degrees."""

    lat: float
    lng: float

    def __post_init__(self):
        for label, value, limit in (("lat", self.lat, 90), ("lng", self.lng, 180)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{label} must be a number, got {value!r}")
            if math.isnan(value) or not -limit <= value <= limit:
                raise ValueError(f"{label} must be within [-{limit}, {limit}], got {value}")

    def as_param(self) -> str:
        """Format as the 'lat,lng' string expected by directions providers."""
        return f"{self.lat},{self.lng}"


@dataclass(frozen=True)
class RouteInfo:
    """Distance and duration of the canonical route leg."""

    distance_meters: int
    distance_text: str
    duration_seconds: int
    duration_text: str

    def __post_init__(self):
        if self.distance_meters < 0 or self.duration_seconds < 0:
            raise ValueError("Route distance and duration must be non-negative")


@dataclass(frozen=True)
class ProviderConfig:
    """Pricing model of a single ride-hailing provider."""

    name: str
    category: str
    base_fare: float
    per_km_rate: float
    per_min_rate: float
