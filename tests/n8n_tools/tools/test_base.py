"""Tests for tool result models."""

import json

from pydantic import BaseModel

from n8n_tools.tools.base import TextContent, ToolCallResult, ToolDefinition, ToolHandler


class Report(BaseModel):
    status_code: int


def test_text_result_is_indented_json() -> None:
    result = ToolHandler.text_result({"success": True, "statusCode": 200})

    assert result.content[0].type == "text"
    assert result.text == json.dumps({"success": True, "statusCode": 200}, indent=2)
    assert result.is_error is None


def test_text_result_dumps_models_by_alias() -> None:
    class AliasedReport(BaseModel):
        model_config = {"alias_generator": lambda name: name.upper()}

        code: int

    result = ToolHandler.text_result(AliasedReport(CODE=1))

    assert json.loads(result.text) == {"CODE": 1}


def test_text_result_error_flag() -> None:
    result = ToolHandler.text_result(Report(status_code=500), is_error=True)

    assert result.to_dict()["isError"] is True
    assert json.loads(result.text) == {"status_code": 500}


def test_to_dict_omits_error_flag_when_unset() -> None:
    result = ToolCallResult(content=[TextContent(text="hi")])

    assert result.to_dict() == {"content": [{"type": "text", "text": "hi"}]}


def test_error_result() -> None:
    result = ToolHandler.error_result("boom")

    assert result.to_dict() == {
        "content": [{"type": "text", "text": "Error: boom"}],
        "isError": True,
    }


def test_definition_to_dict_uses_input_schema_alias() -> None:
    definition = ToolDefinition(name="t", description="d", input_schema={"type": "object"})

    assert definition.to_dict() == {
        "name": "t",
        "description": "d",
        "inputSchema": {"type": "object"},
    }
