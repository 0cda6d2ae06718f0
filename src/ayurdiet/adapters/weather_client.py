"""WeatherAPI.com current conditions client."""

from dataclasses import dataclass

import httpx

from ayurdiet.services.weather import WeatherClient


@dataclass
class HttpxWeatherClient(WeatherClient):
    """HTTPX-backed WeatherAPI.com client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxWeatherClient":
        """Create a weather client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def current(self, query: str) -> dict[str, object]:
        """Fetch current conditions for a "lat,lon" pair or place name."""
        response = await self.http_client.get(
            f"{self.base_url}/current.json",
            params={"key": self.api_key, "q": query, "aqi": "no"},
            timeout=10,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
