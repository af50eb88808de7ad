"""Common utility functions."""

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function} - {message}"


def setup_logging(level: str = "INFO") -> None:
    """
    Replace loguru's default sink with a stderr sink at the given level.

    Args:
        level: Minimum level name, e.g. "INFO" or "DEBUG".
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)


def mask_secret(secret: str | None, visible: int = 8) -> str:
    """
    Mask a credential for display, keeping only its tail.

    Args:
        secret: Raw secret value.
        visible: Number of trailing characters to keep.

    Returns:
        Masked value, or an empty string when no secret is set.
    """
    if not secret:
        return ""
    if len(secret) <= visible:
        return "*" * len(secret)
    return f"...{secret[-visible:]}"


def format_error(error: Exception) -> str:
    """
    Format an exception for display.

    Args:
        error: The exception to format.

    Returns:
        Human-readable error string.
    """
    error_type = type(error).__name__
    return f"{error_type}: {str(error)}"
