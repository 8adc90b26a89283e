"""Tool-related data models."""

from .models import TextContent, ToolDefinition, ToolResult
from .tool_call import ToolCallRequest, ToolCallResult

__all__ = ["TextContent", "ToolDefinition", "ToolResult", "ToolCallRequest", "ToolCallResult"]
