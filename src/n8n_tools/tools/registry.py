"""Tool registry for n8n-tools.

Manages tool registration, lookup and dispatch. Dispatch is the boundary
where handler errors become error-flagged tool results.
"""

import logging
from typing import Any

from n8n_tools.exceptions import N8nToolsError, ToolNotFoundError
from n8n_tools.tools.base import ToolCallResult, ToolHandler

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Registry for tool handler instances.

    Manages handler lifecycle and provides lookup and dispatch by name.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolHandler] = {}

    def register(self, tool: ToolHandler) -> None:
        """Register a tool handler instance."""
        self._tools[tool.name] = tool

    def get(self, name: str) -> ToolHandler | None:
        """Get a tool handler by name."""
        return self._tools.get(name)

    def require(self, name: str) -> ToolHandler:
        """Get a tool handler by name, raising if not found."""
        tool = self.get(name)
        if tool is None:
            raise ToolNotFoundError(name, available=list(self._tools))
        return tool

    def has_tool(self, name: str) -> bool:
        return name in self._tools

    def list_tools(self) -> list[str]:
        """List all registered tool names."""
        return list(self._tools.keys())

    def list_definitions(self) -> list[dict[str, Any]]:
        """Definitions of all registered tools, in registration order."""
        return [tool.definition().to_dict() for tool in self._tools.values()]

    async def call(self, name: str, args: dict[str, Any] | None = None) -> ToolCallResult:
        """Dispatch a tool call and return its result.

        Errors raised by the handler never escape: they are logged and
        returned as an error-flagged result.
        """
        try:
            tool = self.require(name)
            return await tool.execute(args or {})
        except N8nToolsError as e:
            logger.warning("Tool %s failed: %s", name, e.message)
            return ToolHandler.error_result(e.message)
        except Exception as e:
            logger.exception("Unexpected error in tool %s", name)
            return ToolHandler.error_result(str(e) or "Unknown error")


# Global registry for pre-defined tools
_global_registry: ToolRegistry | None = None


def get_tool_registry() -> ToolRegistry:
    """Get the global tool registry."""
    global _global_registry
    if _global_registry is None:
        _global_registry = ToolRegistry()
    return _global_registry


def set_tool_registry(registry: ToolRegistry | None) -> None:
    """Set the global tool registry. Pass None to reset it."""
    global _global_registry
    _global_registry = registry


def register_tool(tool: ToolHandler) -> None:
    """Register a tool in the global registry."""
    get_tool_registry().register(tool)


def get_tool(name: str) -> ToolHandler:
    """Get a tool from the global registry."""
    return get_tool_registry().require(name)
