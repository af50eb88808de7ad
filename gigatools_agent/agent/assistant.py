"""Assistant session: one user message in, one answer out."""

from __future__ import annotations

import json
from typing import Any

from loguru import logger

from gigatools_agent.agent.tools.registry import ToolRegistry
from gigatools_agent.providers.base import LLMProvider, ToolCallRequest

SYSTEM_PROMPT = "You are a assistant who can use tools to answer user questions."

MAX_ITERATIONS_MESSAGE = "I've reached the maximum number of tool iterations without a final answer."


class Assistant:
    """
    Tool-using chat assistant.

    Every call to :meth:`chat` starts a fresh exchange made of the system
    prompt and the user message; no history is kept between calls. Within a
    call, the model may request tools any number of times (bounded by
    ``max_iterations``) before it produces its final text.
    """

    def __init__(
        self,
        provider: LLMProvider,
        tools: ToolRegistry,
        system_prompt: str = SYSTEM_PROMPT,
        model: str | None = None,
        max_iterations: int = 10,
        max_tokens: int = 2048,
        temperature: float = 0.2,
    ) -> None:
        self.provider = provider
        self.tools = tools
        self.system_prompt = system_prompt
        self.model = model
        self.max_iterations = max_iterations
        self.max_tokens = max_tokens
        self.temperature = temperature

    async def chat(self, message: str) -> str:
        """
        Answer a single user message.

        Args:
            message: The user's text.

        Returns:
            The model's final answer.

        Raises:
            TransportError: The model endpoint failed with an HTTP status.
        """
        messages: list[dict[str, Any]] = [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": message},
        ]
        tool_definitions = self.tools.get_definitions() if len(self.tools) > 0 else None

        for iteration in range(1, self.max_iterations + 1):
            response = await self.provider.chat(
                messages=messages,
                tools=tool_definitions,
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )

            if not response.has_tool_calls:
                return response.content or ""

            logger.debug(f"Round {iteration}: model requested {[tc.name for tc in response.tool_calls]}")
            messages.append(self._assistant_message(response.content, response.tool_calls))
            for tc in response.tool_calls:
                result = await self.tools.execute(tc.name, tc.arguments)
                messages.append(
                    {
                        "role": "tool",
                        "tool_call_id": tc.id,
                        "name": tc.name,
                        "content": result,
                    }
                )

        logger.warning(f"No final answer after {self.max_iterations} tool rounds")
        return MAX_ITERATIONS_MESSAGE

    @staticmethod
    def _assistant_message(content: str | None, tool_calls: list[ToolCallRequest]) -> dict[str, Any]:
        return {
            "role": "assistant",
            "content": content or "",
            "tool_calls": [
                {
                    "id": tc.id,
                    "type": "function",
                    "function": {
                        "name": tc.name,
                        "arguments": json.dumps(tc.arguments, ensure_ascii=False),
                    },
                }
                for tc in tool_calls
            ],
        }
