"""Forecast tool: weather forecast for a US coordinate pair."""

from typing import List

from mcp_server_starter.server_core import InvalidInputError, ToolResult, get_logger
from .client import NWSClient, format_coordinate
from .models import ForecastArgs, ForecastPeriod, PointsProperties

logger = get_logger(__name__)

TOOL_NAME = "forecast"
TOOL_DESCRIPTION = "Get weather forecast for a location (US only)"

MAX_PERIODS = 7
NO_FORECAST_TEXT = "No forecast data available for this location"


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Raise InvalidInputError unless both coordinates are in range."""
    if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
        raise InvalidInputError(
            "Invalid coordinates. Latitude must be between -90 and 90, longitude between -180 and 180"
        )


def format_period(period: ForecastPeriod) -> str:
    temperature = "N/A" if period.temperature is None else period.temperature
    return (
        f"\n{period.name}:\n"
        f"- Temperature: {temperature}°{period.temperature_unit}\n"
        f"- Wind: {period.wind_speed} {period.wind_direction}\n"
        f"- Forecast: {period.short_forecast}\n"
        f"- Detailed: {period.detailed_forecast}\n"
    )


def format_forecast(
    latitude: float, longitude: float, points: PointsProperties, periods: List[ForecastPeriod]
) -> str:
    """Render the header and up to MAX_PERIODS periods in upstream order."""
    location = points.relative_location.properties
    body = ("\n" + "-" * 80 + "\n").join(format_period(p) for p in periods[:MAX_PERIODS])
    return (
        f"Weather Forecast for {format_coordinate(latitude)}, {format_coordinate(longitude)}\n"
        f"Location: {location.city}, {location.state}\n"
        f"{'=' * 80}\n"
        f"{body}"
    )


async def get_forecast(client: NWSClient, args: ForecastArgs) -> ToolResult:
    """Resolve the grid point, then fetch and format its forecast.

    Raises:
        InvalidInputError: If the coordinates are out of range. No request is made.
        RemoteServiceError: If either NWS call fails.
    """
    validate_coordinates(args.latitude, args.longitude)

    points = await client.get_points(args.latitude, args.longitude)
    forecast = await client.get_forecast(points.properties.forecast)
    periods = forecast.properties.periods

    if not periods:
        logger.info("No forecast periods returned for %s, %s", args.latitude, args.longitude)
        return ToolResult.text(NO_FORECAST_TEXT)

    return ToolResult.text(format_forecast(args.latitude, args.longitude, points.properties, periods))
