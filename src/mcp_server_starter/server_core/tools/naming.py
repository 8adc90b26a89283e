"""Service-prefixed tool names."""

_SERVICE_PREFIXES = {"garoon": "gr"}


def get_tool_name(service: str, tool_name: str) -> str:
    """Get the published tool name with its service prefix.

    Examples:
        ``get_tool_name("weather", "forecast")`` -> ``"weather_forecast"``
        ``get_tool_name("garoon", "get-schedule-events")`` -> ``"gr_get-schedule-events"``
    """
    prefix = _SERVICE_PREFIXES.get(service, service)
    return f"{prefix}_{tool_name}"
