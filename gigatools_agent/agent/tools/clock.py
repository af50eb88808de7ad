"""Wall-clock tool."""

from __future__ import annotations

from datetime import datetime

from loguru import logger

from gigatools_agent.agent.tools.base import FunctionTool, ToolDescriptor, ToolResult

TIME_PATTERN = "yyyy-MM-dd HH-mm-ss"
TIME_FORMAT = "%Y-%m-%d %H-%M-%S"

CURRENT_TIME = ToolDescriptor(
    name="get_current_time",
    description=f"use this method to get current time, it will return time in format {TIME_PATTERN}",
)


def get_current_time() -> ToolResult:
    """Return the process-local time, e.g. ``2025-04-11 09-30-00``."""
    logger.info("get_current_time")
    return ToolResult(result=datetime.now().strftime(TIME_FORMAT))


def clock_tool() -> FunctionTool:
    return FunctionTool(CURRENT_TIME, get_current_time)
