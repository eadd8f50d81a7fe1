"""Pytest configuration and fixtures for shapeguard tests."""

import asyncio
import logging

import pytest
import structlog

from shapeguard.logging import LoggerRegistry
from shapeguard.messages import reset_messages


@pytest.fixture(autouse=True)
def default_messages():
    """Every test starts and ends with the bundled message catalog."""
    reset_messages()
    yield
    reset_messages()


@pytest.fixture
def restore_logging():
    """Undo configure_logging() so later tests see structlog defaults."""
    yield
    structlog.reset_defaults()
    LoggerRegistry._loggers.clear()
    lib_logger = logging.getLogger("shapeguard")
    lib_logger.handlers = []
    lib_logger.propagate = True
    lib_logger.setLevel(logging.NOTSET)


@pytest.fixture
def wait_rule():
    """Factory for coroutine custom rules that suspend before answering."""
    def make(seconds: float = 0.05, message: str | None = None):
        async def rule(value, obj=None, key=None, path=()):
            await asyncio.sleep(seconds)
            return message
        return rule
    return make
