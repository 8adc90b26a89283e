from .base import ToolRegistry, ToolHandler

__all__ = ["ToolRegistry", "ToolHandler"]
