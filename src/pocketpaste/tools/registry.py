# Tool registry — name -> tool lookup, schema export, dispatch.
# Created: 2026-10-12

from __future__ import annotations

import logging
from typing import Any

from pocketpaste import lifecycle
from pocketpaste.tools.protocol import BaseTool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Registry for tools.

    Usage:
        registry = ToolRegistry()
        registry.register(PastebinPostTool())

        definitions = registry.get_definitions("anthropic")
        result = await registry.execute("pastebin_post", text="hello")
    """

    def __init__(self):
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        self._tools[tool.name] = tool
        logger.debug("🔧 Registered tool: %s", tool.name)

    def unregister(self, name: str) -> None:
        if self._tools.pop(name, None) is not None:
            logger.debug("🔧 Unregistered tool: %s", name)

    def get(self, name: str) -> BaseTool | None:
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        return name in self._tools

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools.keys())

    def get_definitions(self, format: str = "openai") -> list[dict[str, Any]]:
        """Tool definitions in "openai" or "anthropic" format."""
        return [t.definition.schema(format) for t in self._tools.values()]

    async def execute(self, name: str, **params: Any) -> str:
        """Execute a tool by name. Never raises; failures come back as text."""
        tool = self._tools.get(name)
        if not tool:
            return f"Error: Tool '{name}' not found. Available: {self.tool_names}"

        try:
            logger.debug("🔧 Executing %s", name)
            result = await tool.execute(**params)
        except Exception as e:
            logger.error("🔧 %s failed: %s", name, e)
            return f"Error executing {name}: {e}"

        log_result = result[:200] + "..." if len(result) > 200 else result
        logger.debug("🔧 %s result: %s", name, log_result)
        return result

    def __len__(self) -> int:
        return len(self._tools)


_default_registry: ToolRegistry | None = None


def create_default_registry() -> ToolRegistry:
    """Build a registry holding the built-in Pastebin tools."""
    from pocketpaste.tools.builtin.pastebin import PastebinGetTool, PastebinPostTool

    registry = ToolRegistry()
    registry.register(PastebinPostTool())
    registry.register(PastebinGetTool())
    return registry


def get_tool_registry() -> ToolRegistry:
    """Get the shared registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
        lifecycle.register("tool_registry", reset=_reset_tool_registry)
    return _default_registry


def _reset_tool_registry() -> None:
    global _default_registry
    _default_registry = None
