"""Arithmetic tools.

Models are unreliable at arithmetic, so sums, differences and products are
delegated to these functions. Results use Python's default float formatting.
"""

from __future__ import annotations

from loguru import logger

from gigatools_agent.agent.tools.base import FunctionTool, ToolDescriptor, ToolParameter, ToolResult

ADD = ToolDescriptor(
    name="add",
    description="use this method for addition",
    parameters=(
        ToolParameter("value1", "first term"),
        ToolParameter("value2", "second term"),
    ),
)

SUBTRACT = ToolDescriptor(
    name="subtract",
    description="use this method for subtraction",
    parameters=(
        ToolParameter("value1", "number to subtract from"),
        ToolParameter("value2", "the number to be subtracted"),
    ),
)

MULTIPLY = ToolDescriptor(
    name="multiply",
    description="use this method for multiplication",
    parameters=(
        ToolParameter("value1", "first multiplier"),
        ToolParameter("value2", "second factor"),
    ),
)


def add(value1: float, value2: float) -> ToolResult:
    value1, value2 = float(value1), float(value2)
    logger.info(f"add value1: {value1}, value2: {value2}")
    return ToolResult(result=str(value1 + value2))


def subtract(value1: float, value2: float) -> ToolResult:
    """Return value1 minus value2."""
    value1, value2 = float(value1), float(value2)
    logger.info(f"subtract value1: {value1}, value2: {value2}")
    return ToolResult(result=str(value1 - value2))


def multiply(value1: float, value2: float) -> ToolResult:
    value1, value2 = float(value1), float(value2)
    logger.info(f"multiply value1: {value1}, value2: {value2}")
    return ToolResult(result=str(value1 * value2))


def calculator_tools() -> list[FunctionTool]:
    return [
        FunctionTool(ADD, add),
        FunctionTool(SUBTRACT, subtract),
        FunctionTool(MULTIPLY, multiply),
    ]
