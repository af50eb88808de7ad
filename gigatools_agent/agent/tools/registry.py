"""In-memory tool registry."""

from __future__ import annotations

from typing import Any

from loguru import logger

from gigatools_agent.agent.tools.base import Tool
from gigatools_agent.errors import ToolAlreadyRegisteredError


class ToolRegistry:
    """
    Holds the tools offered to the model and dispatches its tool calls.

    Lookup and validation failures are returned as "Error: ..." strings so the
    model can read them and correct its arguments on the next round.
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        if tool.name in self._tools:
            raise ToolAlreadyRegisteredError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name}")

    def unregister(self, name: str) -> None:
        self._tools.pop(name, None)

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        return name in self._tools

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def get_definitions(self) -> list[dict[str, Any]]:
        """Return OpenAI-style function schemas for every registered tool."""
        return [tool.to_schema() for tool in self._tools.values()]

    async def execute(self, name: str, params: dict[str, Any]) -> str:
        tool = self._tools.get(name)
        if not tool:
            return f"Error: Tool '{name}' not found"
        errors = tool.validate_params(params)
        if errors:
            logger.warning(f"Rejected call to {name}: {'; '.join(errors)}")
            return f"Error: Invalid parameters for tool '{name}': " + "; ".join(errors)
        try:
            return await tool.execute(**params)
        except Exception as exc:
            logger.warning(f"Tool {name} failed: {exc}")
            return f"Error executing {name}: {exc}"

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools
