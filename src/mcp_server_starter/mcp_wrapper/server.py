"""Bind the tool registry and the catalogs to an MCP low-level server."""

from typing import Any, Dict, Iterable, List, Optional

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from mcp_server_starter.catalog import PromptCatalog, ResourceCatalog
from mcp_server_starter.server_core import ServerConfig, ToolRegistry, ToolResult, get_logger
from mcp_server_starter.services import build_registry

logger = get_logger(__name__)

__all__ = ["SERVER_NAME", "SERVER_VERSION", "build_server", "run_stdio", "to_call_tool_result"]

SERVER_NAME = "mcp-server-starter"
SERVER_VERSION = "1.0.0"


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """Convert a registry result into the MCP wire type."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        isError=result.is_error,
    )


def build_server(
    config: ServerConfig,
    registry: Optional[ToolRegistry] = None,
    resources: Optional[ResourceCatalog] = None,
    prompts: Optional[PromptCatalog] = None,
) -> Server:
    """Create the MCP server with tools, resources and prompts registered.

    Args:
        config: The server configuration. Used to build the default registry and resource catalog.
        registry: Optional prebuilt tool registry.
        resources: Optional resource catalog.
        prompts: Optional prompt catalog.

    Returns:
        A configured ``mcp.server.lowlevel.Server`` ready to be run.
    """
    tool_registry = registry if registry is not None else build_registry(config)
    resource_catalog = resources if resources is not None else ResourceCatalog(config)
    prompt_catalog = prompts if prompts is not None else PromptCatalog()

    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.parameters)
            for tool in tool_registry.list_tools()
        ]

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await tool_registry.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(to_call_tool_result(result))

    # Registered directly so the registry's result reaches the client unchanged.
    server.request_handlers[types.CallToolRequest] = call_tool

    @server.list_resources()
    async def list_resources() -> List[types.Resource]:
        return resource_catalog.list_resources()

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
        content = resource_catalog.read_resource(str(uri))
        return [ReadResourceContents(content=content.text, mime_type=content.mime_type)]

    @server.list_prompts()
    async def list_prompts() -> List[types.Prompt]:
        return prompt_catalog.list_prompts()

    @server.get_prompt()
    async def get_prompt(name: str, arguments: Optional[Dict[str, Any]]) -> types.GetPromptResult:
        return prompt_catalog.get_prompt(name, arguments)

    logger.debug("Built MCP server '%s' with %d tools.", SERVER_NAME, len(tool_registry.tools))
    return server


async def run_stdio(server: Server) -> None:
    """Serve ``server`` over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
