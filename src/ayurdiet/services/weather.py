"""Weather lookups used as optional diet context."""

import logging
from dataclasses import dataclass
from typing import Protocol

from ayurdiet.domain.errors import WeatherUnavailable
from ayurdiet.domain.weather import WeatherReport

_KPH_PER_MS = 3.6

_logger = logging.getLogger(__name__)


class WeatherClient(Protocol):
    """Interface for current-weather lookups."""

    async def current(self, query: str) -> dict[str, object]:
        """Return raw current conditions for a location query."""


@dataclass
class WeatherService:
    """Service returning current conditions by coordinates or city."""

    client: WeatherClient

    async def get_weather(self, lat: float, lon: float) -> WeatherReport:
        """Current weather at the given coordinates."""
        return await self._fetch(f"{lat},{lon}")

    async def get_weather_by_city(self, city: str) -> WeatherReport:
        """Current weather for a city name."""
        return await self._fetch(city)

    async def _fetch(self, query: str) -> WeatherReport:
        try:
            payload = await self.client.current(query)
            return _parse_report(payload)
        except Exception as exc:
            _logger.warning("Weather lookup failed for %r: %s", query, exc)
            raise WeatherUnavailable(f"Weather data not available for {query}") from exc


def _parse_report(payload: dict[str, object]) -> WeatherReport:
    """Parse a WeatherAPI.com current-conditions payload."""
    current = payload["current"]
    location = payload["location"]
    return WeatherReport(
        temperature_c=float(current["temp_c"]),
        humidity=float(current["humidity"]),
        description=str(current["condition"]["text"]),
        wind_speed_ms=round(float(current["wind_kph"]) / _KPH_PER_MS, 2),
        location=str(location["name"]),
    )
