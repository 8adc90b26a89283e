"""Upstream service integrations exposed as tools."""

from mcp_server_starter.server_core import ServerConfig, ToolRegistry
from .garoon import GaroonClient, register_garoon_tools
from .weather import NWSClient, register_weather_tools


def build_registry(config: ServerConfig) -> ToolRegistry:
    """Create a registry holding every tool, wired to clients built from ``config``."""
    registry = ToolRegistry()
    register_weather_tools(registry, NWSClient(config.nws, timeout=config.http_timeout))
    register_garoon_tools(registry, GaroonClient(config.garoon, timeout=config.http_timeout))
    return registry


__all__ = ["build_registry", "NWSClient", "GaroonClient", "register_weather_tools", "register_garoon_tools"]
