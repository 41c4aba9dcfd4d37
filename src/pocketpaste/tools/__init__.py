from pocketpaste.tools.protocol import BaseTool, ToolDefinition
from pocketpaste.tools.registry import ToolRegistry, create_default_registry, get_tool_registry

__all__ = [
    "BaseTool",
    "ToolDefinition",
    "ToolRegistry",
    "create_default_registry",
    "get_tool_registry",
]
