"""Tool base class and result models for n8n-tools.

Tool handlers receive raw arguments from the dispatch layer and return a
normalized ToolCallResult: a list of text content blocks plus an optional
error flag. Each handler also describes itself with a static ToolDefinition
used for input validation and help generation.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    """A single text block in a tool result."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """Final result from a tool execution."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: list[TextContent] = Field(default_factory=list)
    is_error: bool | None = Field(default=None, alias="isError")

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the dispatch layer; isError is omitted unless set."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ToolDefinition(BaseModel):
    """Static description of a tool."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(alias="inputSchema")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ToolHandler(ABC):
    """Base class for all tool handlers.

    Subclass this, set `name`, and implement `execute()` and `definition()`.
    Handlers raise package errors for bad input; the registry turns those
    into error results.
    """

    name: ClassVar[str]

    @abstractmethod
    async def execute(self, args: dict[str, Any]) -> ToolCallResult:
        """Execute the tool with the given arguments.

        Args:
            args: Tool arguments as supplied by the caller.

        Returns:
            ToolCallResult with JSON or plain text content.
        """
        ...

    @abstractmethod
    def definition(self) -> ToolDefinition:
        """Return the static tool definition."""
        ...

    @staticmethod
    def text_result(payload: Any, is_error: bool = False) -> ToolCallResult:
        """Build a result whose single text block is `payload` as JSON.

        Pydantic models are dumped by alias so camelCase field names survive.
        """
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json", by_alias=True)
        text = json.dumps(payload, indent=2, default=str)
        return ToolCallResult(
            content=[TextContent(text=text)],
            is_error=True if is_error else None,
        )

    @staticmethod
    def error_result(message: str) -> ToolCallResult:
        """Build an error-flagged result carrying a plain text message."""
        return ToolCallResult(
            content=[TextContent(text=f"Error: {message}")],
            is_error=True,
        )
