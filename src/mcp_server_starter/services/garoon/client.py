"""Client for the Garoon REST API using Cybozu password authentication."""

import base64
from typing import Any, Dict, Mapping, Optional

import httpx

from mcp_server_starter.server_core import ConfigurationError, GaroonConfig, JsonApiClient
from .models import ScheduleEventsResponse

SCHEDULE_EVENTS_ENDPOINT = "/api/v1/schedule/events"


class GaroonClient(JsonApiClient):
    """Garoon client that sends ``X-Cybozu-Authorization`` on every request."""

    service_name = "Garoon"

    def __init__(
        self, config: GaroonConfig, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        super().__init__(timeout=timeout, transport=transport)
        self.config = config

    def _headers(self) -> Dict[str, str]:
        raw = f"{self.config.username}:{self.config.password.get_secret_value()}"
        credential = base64.b64encode(raw.encode("utf-8")).decode("ascii")
        return {
            "Content-Type": "application/json",
            "X-Cybozu-Authorization": credential,
        }

    def _url(self, endpoint: str) -> str:
        if not self.config.base_url:
            raise ConfigurationError("Garoon API is not configured. Please set GAROON_BASE_URL in MCP config.")
        return f"{self.config.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    async def request(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """GET an endpoint relative to the configured base URL.

        Raises:
            ConfigurationError: If no base URL is configured.
            RemoteServiceError: If the request fails.
        """
        return await self.get_json(self._url(endpoint), params=params)

    async def get_schedule_events(self, params: Mapping[str, Any]) -> ScheduleEventsResponse:
        """Query schedule events. ``params`` must only contain the fields to send."""
        return await self.get_model(self._url(SCHEDULE_EVENTS_ENDPOINT), ScheduleEventsResponse, params=params)
