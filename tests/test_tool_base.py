"""Tests for the Tool base class, descriptors and parameter validation."""

import asyncio
import json
from typing import Any

import pytest
from pydantic import ValidationError

from gigatools_agent.agent.tools.base import FunctionTool, ToolDescriptor, ToolParameter, ToolResult

PAIR = ToolDescriptor(
    name="pair",
    description="joins two values",
    parameters=(
        ToolParameter("left", "left value"),
        ToolParameter("right", "right value", required=False),
    ),
)


def _pair(left: float, right: float = 0.0) -> ToolResult:
    return ToolResult(result=f"{left}/{right}")


@pytest.fixture
def tool():
    return FunctionTool(PAIR, _pair)


def test_tool_schema_generation(tool):
    schema = tool.to_schema()

    assert schema["type"] == "function"
    assert schema["function"]["name"] == "pair"
    assert schema["function"]["description"] == "joins two values"
    assert "properties" in schema["function"]["parameters"]


def test_tool_validation_success(tool):
    assert tool.validate_params({"left": 1.5, "right": 2}) == []
    assert tool.validate_params({"left": 3}) == []


def test_tool_validation_missing_required(tool):
    assert tool.validate_params({"right": 1.0}) == ["missing required left"]


def test_tool_validation_type_mismatch(tool):
    errors = tool.validate_params({"left": "three", "right": [1]})

    assert "left should be number" in errors
    assert "right should be number" in errors


def test_tool_validation_rejects_bool_as_number(tool):
    assert tool.validate_params({"left": True}) == ["left should be number"]


def test_tool_validation_ignores_undeclared_arguments(tool):
    assert tool.validate_params({"left": 1, "ignored": ""}) == []


def test_tool_bad_schema():
    class ArrayTool(FunctionTool):
        @property
        def parameters(self) -> dict[str, Any]:
            return {"type": "array"}

    with pytest.raises(ValueError, match="Schema must be object type"):
        ArrayTool(PAIR, _pair).validate_params({})


def test_descriptor_keeps_declaration_order():
    schema = PAIR.to_json_schema()

    assert list(schema["properties"]) == ["left", "right"]
    assert schema["properties"]["left"] == {"type": "number", "description": "left value"}
    assert schema["required"] == ["left"]


def test_descriptor_without_parameters():
    schema = ToolDescriptor(name="noop", description="does nothing").to_json_schema()
    assert schema == {"type": "object", "properties": {}, "required": []}


def test_function_tool_returns_json_result(tool):
    assert tool.name == "pair"
    assert tool.to_schema()["function"]["parameters"]["required"] == ["left"]
    result = asyncio.run(tool.execute(left=1.5, right=2))
    assert json.loads(result) == {"result": "1.5/2"}


def test_function_tool_drops_undeclared_arguments(tool):
    result = asyncio.run(tool.execute(left=1, ignored="whatever"))
    assert json.loads(result) == {"result": "1/0.0"}


def test_tool_result_is_immutable():
    result = ToolResult(result="1")
    with pytest.raises(ValidationError):
        result.result = "2"
