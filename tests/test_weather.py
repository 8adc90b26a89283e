from typing import Any, Dict, List

import pytest

from mcp_server_starter.server_core import ServerConfig, ToolRegistry
from mcp_server_starter.services.weather import NWSClient, register_weather_tools
from mcp_server_starter.services.weather.forecast import MAX_PERIODS, NO_FORECAST_TEXT

FORECAST_URL = "https://nws.test/gridpoints/OKX/33,35/forecast"


def _points() -> Dict[str, Any]:
    return {
        "properties": {
            "forecast": FORECAST_URL,
            "relativeLocation": {"properties": {"city": "New York", "state": "NY"}},
        }
    }


def _periods(count: int) -> List[Dict[str, Any]]:
    return [
        {
            "name": f"Period {i}",
            "temperature": 60 + i,
            "temperatureUnit": "F",
            "windSpeed": "10 mph",
            "windDirection": "NW",
            "shortForecast": "Sunny",
            "detailedForecast": f"Sunny, with a high near {60 + i}.",
        }
        for i in range(count)
    ]


def _alert(event: str, instruction: Any = None) -> Dict[str, Any]:
    return {
        "properties": {
            "event": event,
            "severity": "Severe",
            "urgency": "Immediate",
            "areaDesc": "Los Angeles County",
            "headline": f"{event} issued",
            "description": "Strong winds expected.",
            "instruction": instruction,
            "effective": "2024-01-01T00:00:00-08:00",
            "expires": "2024-01-02T00:00:00-08:00",
        }
    }


def _registry(config: ServerConfig, transport: Any) -> ToolRegistry:
    registry = ToolRegistry()
    register_weather_tools(registry, NWSClient(config.nws, transport=transport))
    return registry


@pytest.mark.asyncio
async def test_forecast_renders_first_seven_periods(server_config: ServerConfig, json_transport) -> None:
    recorder = json_transport(
        {
            "/points/40.7128,-74.006": _points(),
            "/gridpoints/OKX/33,35/forecast": {"properties": {"periods": _periods(10)}},
        }
    )
    registry = _registry(server_config, recorder.transport)

    result = await registry.call_tool("weather_forecast", {"latitude": 40.7128, "longitude": -74.006})

    assert result.is_error is False
    text = result.content[0].text
    assert text.startswith("Weather Forecast for 40.7128, -74.006\nLocation: New York, NY\n" + "=" * 80 + "\n")
    assert "\nPeriod 0:\n- Temperature: 60°F\n- Wind: 10 mph NW\n- Forecast: Sunny\n" in text
    assert text.count("- Temperature:") == MAX_PERIODS
    assert text.index("Period 0:") < text.index("Period 6:")
    assert "Period 7:" not in text
    assert text.count("-" * 80) == MAX_PERIODS - 1
    assert [str(r.url.path) for r in recorder.requests] == [
        "/points/40.7128,-74.006",
        "/gridpoints/OKX/33,35/forecast",
    ]


@pytest.mark.asyncio
async def test_forecast_whole_number_coordinates(server_config: ServerConfig, json_transport) -> None:
    recorder = json_transport(
        {
            "/points/40,-74": _points(),
            "/gridpoints/OKX/33,35/forecast": {"properties": {"periods": _periods(1)}},
        }
    )
    registry = _registry(server_config, recorder.transport)

    result = await registry.call_tool("weather_forecast", {"latitude": 40, "longitude": -74})

    assert result.is_error is False
    assert result.content[0].text.startswith("Weather Forecast for 40, -74\n")


@pytest.mark.asyncio
async def test_forecast_out_of_range_makes_no_request(server_config: ServerConfig, json_transport) -> None:
    recorder = json_transport({})
    registry = _registry(server_config, recorder.transport)

    result = await registry.call_tool("weather_forecast", {"latitude": 91, "longitude": 0})

    assert result.is_error is True
    assert result.content[0].text.startswith("Error: Invalid coordinates")
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_forecast_rejects_string_coordinates(server_config: ServerConfig, json_transport) -> None:
    recorder = json_transport({})
    registry = _registry(server_config, recorder.transport)

    result = await registry.call_tool("weather_forecast", {"latitude": "40.7", "longitude": -74})

    assert result.is_error is True
    assert "latitude" in result.content[0].text
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_forecast_without_periods(server_config: ServerConfig, json_transport) -> None:
    recorder = json_transport(
        {
            "/points/40,-74": _points(),
            "/gridpoints/OKX/33,35/forecast": {"properties": {"periods": []}},
        }
    )
    registry = _registry(server_config, recorder.transport)

    result = await registry.call_tool("weather_forecast", {"latitude": 40, "longitude": -74})

    assert result.is_error is False
    assert result.content[0].text == NO_FORECAST_TEXT


@pytest.mark.asyncio
async def test_forecast_upstream_failure(server_config: ServerConfig, json_transport) -> None:
    recorder = json_transport({})
    registry = _registry(server_config, recorder.transport)

    result = await registry.call_tool("weather_forecast", {"latitude": 10, "longitude": 10})

    assert result.is_error is True
    assert result.content[0].text == "Error: NWS API error: HTTP 404 - Not Found"


@pytest.mark.asyncio
async def test_alerts_normalizes_state(server_config: ServerConfig, json_transport) -> None:
    recorder = json_transport({"/alerts": {"features": [_alert("Wind Advisory"), _alert("Flood Watch", "Move")]}})
    registry = _registry(server_config, recorder.transport)

    result = await registry.call_tool("weather_alerts", {"state": "ca"})

    assert result.is_error is False
    text = result.content[0].text
    assert recorder.requests[0].url.params["area"] == "CA"
    assert text.startswith("Weather Alerts for CA\n" + "=" * 80 + "\n")
    assert "\nAlert 1:\n- Event: Wind Advisory\n- Severity: Severe\n" in text
    assert "- Areas: Los Angeles County\n" in text
    assert "- Instructions: None provided\n" in text
    assert "\nAlert 2:\n- Event: Flood Watch\n" in text
    assert "- Instructions: Move\n" in text


@pytest.mark.asyncio
async def test_alerts_without_features(server_config: ServerConfig, json_transport) -> None:
    recorder = json_transport({"/alerts": {"features": []}})
    registry = _registry(server_config, recorder.transport)

    result = await registry.call_tool("weather_alerts", {"state": "TX"})

    assert result.is_error is False
    assert result.content[0].text == "No active weather alerts for TX"


@pytest.mark.asyncio
@pytest.mark.parametrize("state", ["California", "C", "C1"])
async def test_alerts_invalid_state(server_config: ServerConfig, json_transport, state: str) -> None:
    recorder = json_transport({})
    registry = _registry(server_config, recorder.transport)

    result = await registry.call_tool("weather_alerts", {"state": state})

    assert result.is_error is True
    assert result.content[0].text.startswith("Error: Invalid state code")
    assert recorder.requests == []


def test_weather_schemas(server_config: ServerConfig) -> None:
    registry = _registry(server_config, None)

    forecast = registry.tools["weather_forecast"]
    assert forecast.description == "Get weather forecast for a location (US only)"
    assert forecast.parameters["required"] == ["latitude", "longitude"]
    assert forecast.parameters["properties"]["latitude"]["type"] == "number"
    assert forecast.parameters["properties"]["latitude"]["minimum"] == -90
    assert forecast.parameters["properties"]["longitude"]["maximum"] == 180

    alerts = registry.tools["weather_alerts"]
    assert alerts.description == "Get weather alerts for a US state"
    assert alerts.parameters["properties"]["state"]["pattern"] == "^[A-Z]{2}$"
