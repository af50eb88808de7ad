"""Agent core module."""

from gigatools_agent.agent.assistant import SYSTEM_PROMPT, Assistant

__all__ = ["Assistant", "SYSTEM_PROMPT"]
