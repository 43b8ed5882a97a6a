"""Test configuration and shared fixtures."""

import pytest
from loguru import logger

from easymatch.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test reads settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_messages():
    """Collect easymatch log messages at TRACE level."""
    messages: list[str] = []
    logger.enable("easymatch")
    sink_id = logger.add(messages.append, level="TRACE", format="{message}")
    yield messages
    logger.remove(sink_id)
    logger.disable("easymatch")
