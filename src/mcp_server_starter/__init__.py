"""MCP Server Starter - weather and Garoon groupware tools over the Model Context Protocol."""

from .server_core import (
    ServerConfig,
    load_config,
    ToolRegistry,
    ToolResult,
    get_tool_name,
    ServerError,
    InvalidInputError,
    ConfigurationError,
    RemoteServiceError,
    NotFoundError,
    UnknownToolError,
)
from .services import build_registry
from .catalog import PromptCatalog, ResourceCatalog
from .mcp_wrapper import build_server, run_stdio

__all__ = [
    "ServerConfig",
    "load_config",
    "ToolRegistry",
    "ToolResult",
    "get_tool_name",
    "ServerError",
    "InvalidInputError",
    "ConfigurationError",
    "RemoteServiceError",
    "NotFoundError",
    "UnknownToolError",
    "build_registry",
    "PromptCatalog",
    "ResourceCatalog",
    "build_server",
    "run_stdio",
]
