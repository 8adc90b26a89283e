from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    """A single text block of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """
    The outcome of one tool invocation as returned to the caller.

    Attributes:
        content: Ordered text blocks.
        is_error: True if the invocation failed. Serialised as ``isError``.
    """

    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        """Build a successful single-block result."""
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        """Build an error result whose text is ``Error: <message>``."""
        return cls(content=[TextContent(text=f"Error: {message}")], is_error=True)


class ToolDefinition(BaseModel):
    """
    Represents a tool that can be listed and invoked through the registry.

    Attributes:
        name: The unique name of the tool.
        description: A brief description of what the tool does.
        func: Async callable implementing the tool. It receives the decoded
              ``args_model`` instance and returns a ToolResult.
        parameters: The JSON schema published to callers for the tool's input.
        args_model: Pydantic model used to decode the untyped call arguments.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    description: str
    func: Callable[[Any], Awaitable[ToolResult]]
    parameters: Dict[str, Any]
    args_model: Optional[Type[BaseModel]] = None
