"""LLM providers module."""

from gigatools_agent.providers.base import LLMProvider, LLMResponse, ToolCallRequest
from gigatools_agent.providers.litellm_provider import LiteLLMProvider

__all__ = ["LLMProvider", "LLMResponse", "ToolCallRequest", "LiteLLMProvider"]
