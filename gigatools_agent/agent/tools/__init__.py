"""Agent tools module."""

from gigatools_agent.agent.tools.base import FunctionTool, Tool, ToolDescriptor, ToolParameter, ToolResult
from gigatools_agent.agent.tools.calculator import calculator_tools
from gigatools_agent.agent.tools.clock import clock_tool
from gigatools_agent.agent.tools.registry import ToolRegistry
from gigatools_agent.agent.tools.risk import risk_tool


def build_default_tools() -> ToolRegistry:
    """Build the registry with the calculator, clock and risk tools."""
    registry = ToolRegistry()
    for tool in calculator_tools():
        registry.register(tool)
    registry.register(clock_tool())
    registry.register(risk_tool())
    return registry


__all__ = [
    "FunctionTool",
    "Tool",
    "ToolDescriptor",
    "ToolParameter",
    "ToolRegistry",
    "ToolResult",
    "build_default_tools",
]
