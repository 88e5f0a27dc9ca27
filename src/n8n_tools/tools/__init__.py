"""Tool system for n8n-tools.

Tool handlers take raw arguments from a dispatch layer and return a
normalized ToolCallResult.

Usage:
    from n8n_tools.tools import get_tool_registry, register_builtin_tools

    # Register pre-defined tools at startup
    register_builtin_tools()

    registry = get_tool_registry()
    result = await registry.call("test_webhook", {"workflowName": "orders"})
"""

from n8n_tools.tools.base import (
    TextContent,
    ToolCallResult,
    ToolDefinition,
    ToolHandler,
)
from n8n_tools.tools.registry import (
    ToolRegistry,
    get_tool,
    get_tool_registry,
    register_tool,
    set_tool_registry,
)
from n8n_tools.tools.webhooks import (
    WebhookTestHandler,
    WebhookTestRequest,
    build_webhook_url,
    get_test_webhook_tool_definition,
)

__all__ = [
    # Base
    "TextContent",
    "ToolCallResult",
    "ToolDefinition",
    "ToolHandler",
    # Registry
    "ToolRegistry",
    "get_tool_registry",
    "set_tool_registry",
    "register_tool",
    "get_tool",
    # Webhooks
    "WebhookTestHandler",
    "WebhookTestRequest",
    "build_webhook_url",
    "get_test_webhook_tool_definition",
    # Builtin
    "register_builtin_tools",
]


def register_builtin_tools() -> None:
    """Register all pre-defined tools in the global registry.

    Call this at application startup to make builtin tools available.
    """
    register_tool(WebhookTestHandler())
