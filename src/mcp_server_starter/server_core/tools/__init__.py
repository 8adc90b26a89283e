from .models import TextContent, ToolDefinition, ToolResult, ToolCallRequest, ToolCallResult
from .registry import ToolRegistry, ToolHandler
from .schema import SchemaValidator
from .naming import get_tool_name

__all__ = [
    "TextContent",
    "ToolDefinition",
    "ToolResult",
    "ToolCallRequest",
    "ToolCallResult",
    "ToolRegistry",
    "ToolHandler",
    "SchemaValidator",
    "get_tool_name",
]
