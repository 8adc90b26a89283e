"""Weather tools backed by the National Weather Service API."""

from functools import partial

from mcp_server_starter.server_core import ToolRegistry, get_tool_name
from . import alerts, forecast
from .client import NWSClient
from .models import AlertsArgs, ForecastArgs

SERVICE = "weather"


def register_weather_tools(registry: ToolRegistry, client: NWSClient) -> None:
    """Register the forecast and alerts tools, bound to ``client``."""
    registry.register(
        get_tool_name(SERVICE, forecast.TOOL_NAME),
        description=forecast.TOOL_DESCRIPTION,
        func=partial(forecast.get_forecast, client),
        args_model=ForecastArgs,
    )
    registry.register(
        get_tool_name(SERVICE, alerts.TOOL_NAME),
        description=alerts.TOOL_DESCRIPTION,
        func=partial(alerts.get_alerts, client),
        args_model=AlertsArgs,
    )


__all__ = ["NWSClient", "ForecastArgs", "AlertsArgs", "register_weather_tools"]
