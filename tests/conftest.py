"""Shared fixtures."""

import sys

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def _restore_log_sink():
    """CLI commands swap loguru's sink for the runner's stderr; put the default back."""
    yield
    logger.remove()
    logger.add(sys.stderr)
