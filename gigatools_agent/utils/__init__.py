"""Utility functions."""

from gigatools_agent.utils.helpers import format_error, mask_secret, setup_logging

__all__ = ["format_error", "mask_secret", "setup_logging"]
