"""Client for the National Weather Service API (api.weather.gov)."""

from typing import Dict, Optional

import httpx

from mcp_server_starter.server_core import JsonApiClient, WeatherConfig
from .models import NWSAlertsResponse, NWSForecastResponse, NWSPointsResponse


def format_coordinate(value: float) -> str:
    """Render a coordinate without a trailing ``.0`` for whole numbers."""
    return str(int(value)) if float(value).is_integer() else str(value)


class NWSClient(JsonApiClient):
    """Read-only NWS client. Every request carries the configured User-Agent."""

    service_name = "NWS"

    def __init__(
        self, config: WeatherConfig, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        """Initialize the client.

        Args:
            config: NWS settings (base URL and user agent).
            timeout: Per-request timeout in seconds.
            transport: Optional httpx transport override.
        """
        super().__init__(timeout=timeout, transport=transport)
        self.config = config

    def _headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "application/geo+json",
        }

    def _url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}{path}"

    async def get_points(self, latitude: float, longitude: float) -> NWSPointsResponse:
        """Resolve the grid point metadata for a coordinate pair."""
        path = f"/points/{format_coordinate(latitude)},{format_coordinate(longitude)}"
        return await self.get_model(self._url(path), NWSPointsResponse)

    async def get_forecast(self, forecast_url: str) -> NWSForecastResponse:
        """Fetch the forecast resource returned by ``get_points``."""
        return await self.get_model(forecast_url, NWSForecastResponse)

    async def get_alerts(self, state: str) -> NWSAlertsResponse:
        """Fetch active alerts for a two-letter state code."""
        return await self.get_model(self._url("/alerts"), NWSAlertsResponse, params={"area": state})
