"""Weather domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherReport:
    """Current conditions used as optional context for diet advice."""

    temperature_c: float
    humidity: float
    description: str
    wind_speed_ms: float
    location: str
