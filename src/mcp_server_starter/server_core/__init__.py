"""Public exports for the core server abstractions and utilities."""

from .config import ServerConfig, WeatherConfig, GaroonConfig, load_config
from .exceptions import (
    ServerError,
    InvalidInputError,
    ConfigurationError,
    RemoteServiceError,
    NotFoundError,
    UnknownToolError,
    ToolRegistrationError,
)
from .http import JsonApiClient
from .logger import get_logger, setup_logging
from .tools import (
    TextContent,
    ToolDefinition,
    ToolResult,
    ToolCallRequest,
    ToolCallResult,
    ToolRegistry,
    SchemaValidator,
    get_tool_name,
)

__all__ = [
    "ServerConfig",
    "WeatherConfig",
    "GaroonConfig",
    "load_config",
    "ServerError",
    "InvalidInputError",
    "ConfigurationError",
    "RemoteServiceError",
    "NotFoundError",
    "UnknownToolError",
    "ToolRegistrationError",
    "JsonApiClient",
    "get_logger",
    "setup_logging",
    "TextContent",
    "ToolDefinition",
    "ToolResult",
    "ToolCallRequest",
    "ToolCallResult",
    "ToolRegistry",
    "SchemaValidator",
    "get_tool_name",
]
