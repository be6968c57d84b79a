"""Pytest fixtures for the task manager tests."""

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from task_manager.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings and root handlers between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logging.getLogger().handlers.clear()


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()
