"""n8n-tools exception hierarchy.

Provides a unified exception hierarchy for tool handlers and the dispatch
layer. This enables:
- Readable error results returned to the calling agent
- Programmatic error handling in library usage
- Clear distinction between bad input and bad configuration

Usage:
    from n8n_tools.exceptions import MissingArgumentError, N8nToolsError

    try:
        await handler.execute(args)
    except MissingArgumentError as e:
        print(f"Missing: {e.argument}")
    except N8nToolsError as e:
        print(f"n8n-tools error: {e}")
"""


class N8nToolsError(Exception):
    """Base exception for all n8n-tools errors.

    All package-specific exceptions inherit from this class, allowing
    callers to catch them with a single except clause.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Configuration Errors


class ConfigurationError(N8nToolsError):
    """Error in n8n-tools configuration.

    Raised when a required setting (such as the n8n API URL) is missing
    or invalid.
    """

    def __init__(self, setting: str, reason: str = "not configured") -> None:
        self.setting = setting
        self.reason = reason
        super().__init__(f"{setting} is {reason}")


# Tool Errors


class ToolError(N8nToolsError):
    """Base class for tool-related errors."""

    pass


class ToolNotFoundError(ToolError):
    """Tool not found.

    Raised when a tool name doesn't match any registered tool.
    """

    def __init__(self, tool_name: str, available: list[str] | None = None) -> None:
        self.tool_name = tool_name
        self.available = available or []
        message = f"Tool not found: {tool_name}"
        if available is not None:
            message += f". Available: {', '.join(sorted(available)) or '(none)'}"
        super().__init__(message)


# Validation Errors


class ValidationError(N8nToolsError):
    """Base class for validation errors."""

    pass


class MissingArgumentError(ValidationError):
    """Required tool argument missing or empty."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument} is required")


class InvalidArgumentError(ValidationError):
    """Invalid tool argument.

    Raised when a tool argument is present but has the wrong type or value.
    """

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")
