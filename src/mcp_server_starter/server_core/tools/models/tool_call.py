"""Data models for tool execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ...exceptions import ServerError
from .models import ToolResult


@dataclass(frozen=True)
class ToolCallRequest:
    """Represents a normalized tool call request from a client."""

    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolCallResult:
    """Represents the outcome of executing a tool call.

    Exactly one of ``result`` and ``error`` is set.
    """

    name: str
    result: Optional[ToolResult] = None
    error: Optional[ServerError] = None

    @classmethod
    def success(cls, name: str, result: ToolResult) -> ToolCallResult:
        return cls(name=name, result=result)

    @classmethod
    def failure(cls, name: str, error: ServerError) -> ToolCallResult:
        return cls(name=name, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_tool_result(self) -> ToolResult:
        """Collapse the outcome into the result shape callers receive."""
        if self.error is not None:
            return ToolResult.error(str(self.error))
        if self.result is None:
            raise ServerError(f"Tool '{self.name}' finished without a result or an error.")
        return self.result
