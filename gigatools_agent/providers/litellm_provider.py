"""LiteLLM-based LLM provider implementation."""

import json
from typing import Any

from loguru import logger

from gigatools_agent.errors import TransportError
from gigatools_agent.providers.base import LLMProvider, LLMResponse, ToolCallRequest


class LiteLLMProvider(LLMProvider):
    """
    LLM provider using LiteLLM as a unified gateway.

    GigaChat is the default target, but any model string LiteLLM can route
    (OpenAI, Anthropic, OpenRouter, vLLM, ...) works as well.

    Retries are left to LiteLLM via ``num_retries``. When a request still fails
    with an HTTP status, it surfaces as :class:`TransportError`.
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_base: str | None = None,
        default_model: str = "gigachat/GigaChat-2-Max",
        max_retries: int = 3,
        profanity_check: bool = False,
    ):
        super().__init__(api_key, api_base)
        self._default_model = default_model
        self.max_retries = max_retries
        self.profanity_check = profanity_check

    async def chat(
        self,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
        model: str | None = None,
        max_tokens: int = 2048,
        temperature: float = 0.2,
    ) -> LLMResponse:
        """Send a chat completion request via LiteLLM."""
        try:
            import litellm
        except ImportError:
            raise RuntimeError("litellm is required. Install with: pip install litellm")

        use_model = model or self._default_model

        kwargs: dict[str, Any] = {
            "model": use_model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "num_retries": self.max_retries,
            "extra_body": {"profanity_check": self.profanity_check},
        }

        if self.api_key:
            kwargs["api_key"] = self.api_key
        if self.api_base:
            kwargs["api_base"] = self.api_base
        if tools:
            kwargs["tools"] = tools

        logger.debug(f"LLM request: model={use_model}, messages={len(messages)}, tools={len(tools or [])}")

        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as exc:
            status_code = getattr(exc, "status_code", None)
            if not isinstance(status_code, int):
                raise
            raise TransportError(status_code, _error_body(exc)) from exc

        choice = response.choices[0]
        message = choice.message

        # Parse tool calls
        tool_calls: list[ToolCallRequest] = []
        if message.tool_calls:
            for tc in message.tool_calls:
                arguments = tc.function.arguments
                if isinstance(arguments, str):
                    try:
                        arguments = json.loads(arguments) if arguments else {}
                    except json.JSONDecodeError:
                        arguments = {"raw": arguments}

                tool_calls.append(
                    ToolCallRequest(
                        id=tc.id,
                        name=tc.function.name,
                        arguments=arguments,
                    )
                )

        # Parse usage
        usage = {}
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens or 0,
                "completion_tokens": response.usage.completion_tokens or 0,
                "total_tokens": response.usage.total_tokens or 0,
            }

        logger.debug(
            f"LLM response: finish_reason={choice.finish_reason}, tool_calls={len(tool_calls)}, usage={usage}"
        )

        return LLMResponse(
            content=message.content,
            tool_calls=tool_calls,
            finish_reason=choice.finish_reason or "stop",
            usage=usage,
        )

    def get_default_model(self) -> str:
        """Get the default model for this provider."""
        return self._default_model


def _error_body(exc: Exception) -> str:
    """Best-effort response body of a failed request."""
    response = getattr(exc, "response", None)
    text = getattr(response, "text", None)
    if isinstance(text, str) and text:
        return text
    message = getattr(exc, "message", None)
    return message if isinstance(message, str) and message else str(exc)
