"""n8n-tools - tool handlers for driving an n8n instance from an agent."""

from n8n_tools.env import N8nSettings, get_env_config
from n8n_tools.exceptions import N8nToolsError
from n8n_tools.tools import (
    ToolCallResult,
    ToolRegistry,
    WebhookTestHandler,
    get_tool_registry,
    register_builtin_tools,
)

__version__ = "0.1.0"

__all__ = [
    "N8nSettings",
    "N8nToolsError",
    "ToolCallResult",
    "ToolRegistry",
    "WebhookTestHandler",
    "get_env_config",
    "get_tool_registry",
    "register_builtin_tools",
]
